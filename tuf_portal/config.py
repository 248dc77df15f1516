import os
import json
import logging

import firebase_admin
from firebase_admin import credentials

from tuf_portal.core.settings import settings

logger = logging.getLogger("tuf_portal.config")


def init_firebase():
    """Initialize the Firebase admin SDK used to verify login ID tokens.

    Behavior:
    - If FIREBASE_CERT_JSON env var is present, parse it as JSON and use it.
    - Else if FIREBASE_CERT_PATH is set or file 'firebase_key.json' exists, use that path.
    - Else, do nothing (avoid raising at import time).
    """
    if firebase_admin._apps:
        return

    fb_json = os.environ.get("FIREBASE_CERT_JSON")
    if fb_json:
        try:
            cred = credentials.Certificate(json.loads(fb_json))
            firebase_admin.initialize_app(cred)
            return
        except (ValueError, OSError) as e:
            # Fall through to file-based loading which may still work
            logger.warning(f"Failed to init Firebase from FIREBASE_CERT_JSON: {e}")

    fb_path = settings.firebase_cert_path
    if fb_path and os.path.exists(fb_path):
        try:
            cred = credentials.Certificate(fb_path)
            firebase_admin.initialize_app(cred)
            return
        except (ValueError, OSError) as e:
            logger.warning(f"Failed to init Firebase from path {fb_path}: {e}")

    logger.warning("No Firebase credentials found; skipping Firebase initialization.")


def firebase_configured() -> bool:
    return bool(firebase_admin._apps)
