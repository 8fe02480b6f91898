"""Liveness endpoint for the ProFlow API; touches neither the database nor Firebase."""

from fastapi import APIRouter

from proflow.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Service name, version and environment, plus how Firebase credentials are sourced."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "identityCredentials": (
            "service_account" if settings.firebase_credentials_file else "application_default"
        ),
    }
