# newsdesk/api/auth.py

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import APIKeyHeader, OAuth2PasswordBearer
from sqlalchemy.orm import Session

from newsdesk.config import Settings
from newsdesk.core import auth as auth_service
from newsdesk.database import get_db
from newsdesk.schemas import Credentials, Token, UserOut


router = APIRouter(prefix="/api/auth", tags=["auth"])

# the browser client sends x-auth-token; Authorization: Bearer is accepted too
token_header = APIKeyHeader(name="x-auth-token", auto_error=False)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    header_token: str | None = Depends(token_header),
    bearer_token: str | None = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    return auth_service.verify_token(header_token or bearer_token, settings)


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(
    credentials: Credentials,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token = auth_service.register(db, settings, credentials.username, credentials.password)
    return {"token": token}


@router.post("/login", response_model=Token)
def login(
    credentials: Credentials,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token = auth_service.login(db, settings, credentials.username, credentials.password)
    return {"token": token}


@router.get("/me", response_model=UserOut)
def read_users_me(user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    user = auth_service.get_user(db, user_id)
    return {"id": user.id, "username": user.username}
