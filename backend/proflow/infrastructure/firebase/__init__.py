from .firebase_app import initialize_firebase
from .firebase_identity_store import FirebaseIdentityStore

__all__ = [
    "initialize_firebase",
    "FirebaseIdentityStore",
]
