"""Firebase app setup and client access.

The Firestore database and Cloud Messaging are both reached through a single
firebase-admin app. Credentials are resolved in this order:
    1. FIREBASE_CREDENTIALS holding inline service-account JSON
    2. FIREBASE_CREDENTIALS holding a path to a service-account JSON file
    3. FIREBASE_PROJECT_ID alone (application default credentials)
    4. Application default credentials and project
"""
import json
import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore_async

from .config import settings

logger = logging.getLogger(__name__)

_app: Optional[firebase_admin.App] = None


class FirebaseConfigError(RuntimeError):
    """Raised when the configured Firebase credentials cannot be loaded."""


def _load_credential(raw: Optional[str]) -> Optional[credentials.Base]:
    """Build a credential from inline JSON or a file path, if one is configured."""
    if not raw or not raw.strip():
        return None
    
    value = raw.strip()
    if value.startswith("{"):
        try:
            return credentials.Certificate(json.loads(value))
        except ValueError as e:
            raise FirebaseConfigError(f"Invalid inline Firebase credentials: {e}") from e
    
    if not os.path.exists(value):
        raise FirebaseConfigError(f"Firebase credentials file not found: {value}")
    try:
        return credentials.Certificate(value)
    except (IOError, ValueError) as e:
        raise FirebaseConfigError(f"Invalid Firebase credentials file {value}: {e}") from e


def init_firebase() -> firebase_admin.App:
    """Initialize the default Firebase app once and return it."""
    global _app
    if _app is not None:
        return _app
    
    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    cred = _load_credential(settings.firebase_credentials)
    
    if cred is not None:
        _app = firebase_admin.initialize_app(cred, options=options)
        logger.info("Firebase initialized with service account credentials")
    else:
        _app = firebase_admin.initialize_app(options=options)
        logger.info(
            f"Firebase initialized with application default credentials "
            f"(project={settings.firebase_project_id or 'default'})"
        )
    return _app


def get_firestore():
    """Get the async Firestore client bound to the Firebase app."""
    return firestore_async.client(app=init_firebase())


def close_firebase():
    """Release the Firebase app."""
    global _app
    if _app is not None:
        firebase_admin.delete_app(_app)
        _app = None
        logger.info("Firebase app closed")
