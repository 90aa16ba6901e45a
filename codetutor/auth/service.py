"""Credential store: user registration, password checks and token issuance."""

import logging

import bcrypt as _bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from codetutor.auth.jwt import create_access_token
from codetutor.config.settings import Settings
from codetutor.db.models import User
from codetutor.errors import ConflictError, NotFound, Unauthenticated

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def hash_password(password: str) -> str:
    return _bcrypt.hashpw(password.encode(), _bcrypt.gensalt()).decode()


def check_password(password: str, password_hash: str) -> bool:
    return _bcrypt.checkpw(password.encode(), password_hash.encode())


def register_user(db: Session, email: str, password: str, settings: Settings) -> tuple[User, str]:
    email = _normalize_email(email)
    if db.scalar(select(User.id).where(User.email == email)) is not None:
        raise ConflictError("Email already registered")

    user = User(email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration for the same email
        db.rollback()
        raise ConflictError("Email already registered")

    logger.info("Registered user %s", user.id)
    return user, create_access_token(user.id, settings)


def authenticate_user(db: Session, email: str, password: str, settings: Settings) -> tuple[User, str]:
    user = db.scalar(select(User).where(User.email == _normalize_email(email)))
    if user is None or not check_password(password, user.password_hash):
        raise Unauthenticated(INVALID_CREDENTIALS)
    return user, create_access_token(user.id, settings)


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user
