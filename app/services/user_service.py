"""
User Service

Registration and lookup. Users are immutable after creation.
"""

import logging
from typing import Any, Dict, Optional

from app.extensions import db
from app.models.user import User
from app.services.food_helpers import serialize_user
from app.utils.errors import NotFoundError, ValidationFailed

logger = logging.getLogger(__name__)


def create_user(name: str, email: str) -> Dict[str, Any]:
    """
    Create a user account.

    Raises:
        ValidationFailed: If name or email is empty
        sqlalchemy.exc.IntegrityError: If the email is already registered
    """
    name = (name or "").strip()
    email = (email or "").strip()
    if not name:
        raise ValidationFailed("VALIDATION_ERROR", "name is required")
    if not email:
        raise ValidationFailed("VALIDATION_ERROR", "email is required")

    user = User(name=name, email=email)
    db.session.add(user)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Created user id=%s", user.id)
    return serialize_user(user)


def get_user(user_id: int) -> Optional[Dict[str, Any]]:
    user = db.session.get(User, user_id)
    return serialize_user(user) if user else None


def require_user(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError("USER_NOT_FOUND", f"user {user_id} does not exist")
    return user
