import logging

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth as firebase_auth

from .config import ADMIN_AUTH_ENABLED
from .store import initialize_firebase_app

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def verify_firebase_token(token: str) -> dict:
    """Verify a Firebase ID token and return its decoded claims"""
    try:
        return firebase_auth.verify_id_token(token, app=initialize_firebase_app())
    except firebase_auth.ExpiredIdTokenError as e:
        logger.warning("⚠️ Expired Firebase ID token")
        raise HTTPException(status_code=401, detail="Token expired") from e
    except (firebase_auth.InvalidIdTokenError, ValueError) as e:
        logger.warning(f"⚠️ Invalid Firebase ID token: {e}")
        raise HTTPException(status_code=401, detail="Invalid token") from e
    except firebase_auth.CertificateFetchError as e:
        logger.error(f"❌ Could not fetch token signing certificates: {e}")
        raise HTTPException(status_code=503, detail="Unable to verify token") from e


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """Dependency guarding every admin endpoint"""
    if not ADMIN_AUTH_ENABLED:
        return {"uid": "local-admin"}

    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated. Please provide a valid Bearer token in the Authorization header.",
        )

    claims = verify_firebase_token(credentials.credentials)
    logger.debug(f"✅ Admin authenticated: {claims.get('uid')}")
    return claims
