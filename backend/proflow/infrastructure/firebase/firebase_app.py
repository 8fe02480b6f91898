"""Firebase Admin SDK initialization."""

import logging

import firebase_admin
from firebase_admin import App, credentials

from proflow.config import Settings

logger = logging.getLogger(__name__)


def initialize_firebase(settings: Settings) -> App:
    """Return the default Firebase app, initializing it on first use.

    Uses the service-account file from settings when configured, otherwise
    Application Default Credentials.
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    if settings.firebase_credentials_file:
        cred = credentials.Certificate(settings.firebase_credentials_file)
        app = firebase_admin.initialize_app(cred, options)
        logger.info("Firebase Admin initialized from service account file")
    else:
        app = firebase_admin.initialize_app(credentials.ApplicationDefault(), options)
        logger.info("Firebase Admin initialized with application default credentials")
    return app
