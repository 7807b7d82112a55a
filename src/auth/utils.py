import logging
from typing import Optional

import bcrypt

from src.config import settings

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash password using a freshly salted bcrypt digest"""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Compare a plain password against a stored bcrypt hash.
    A missing or malformed hash never matches.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt digest")
        return False
