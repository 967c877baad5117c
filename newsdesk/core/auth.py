# newsdesk/core/auth.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from newsdesk.config import Settings
from newsdesk.core.errors import (
    Conflict,
    InvalidCredentials,
    InvalidInput,
    StoreFailure,
    Unauthorized,
)
from newsdesk.models.user import User


logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# -------------------------------
# Password & Token Helpers
# -------------------------------

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: str, settings: Settings, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str | None, settings: Settings) -> str:
    """
    Returns the user id carried by a token.
    Depends only on the token and the signing secret; nothing is looked up.
    """
    if not token:
        raise Unauthorized()
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise Unauthorized()

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise Unauthorized()
    return user_id


# -------------------------------
# Auth Service
# -------------------------------

def _require_credentials(username: str | None, password: str | None):
    if not username or not username.strip() or not password:
        raise InvalidInput("Username and password are required")


def register(db: Session, settings: Settings, username: str, password: str) -> str:
    _require_credentials(username, password)

    if db.query(User).filter(User.username == username).first():
        raise Conflict("Username already exists")

    new_user = User(username=username, hashed_password=get_password_hash(password))
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Username already exists")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to create user")
        raise StoreFailure(detail=str(e))

    logger.info("Registered user %s", new_user.id)
    return create_access_token(new_user.id, settings)


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def login(db: Session, settings: Settings, username: str, password: str) -> str:
    _require_credentials(username, password)

    user = authenticate_user(db, username, password)
    if not user:
        raise InvalidCredentials()
    return create_access_token(user.id, settings)


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise Unauthorized()
    return user
