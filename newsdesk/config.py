# newsdesk/config.py

import os
import logging
from dataclasses import dataclass, field
from dotenv import load_dotenv


logger = logging.getLogger(__name__)

DEV_SECRET_KEY = "newsdesk-dev-secret"


def _split_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, built once at startup and passed to create_app().
    Request handlers read it from app.state and never touch the environment.
    """
    news_api_key: str = ""
    news_api_url: str = "https://newsapi.org/v2"
    news_api_timeout: float = 15.0
    database_url: str = "sqlite:///./data/newsdesk.db"
    jwt_secret_key: str = DEV_SECRET_KEY
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            logger.warning("JWT_SECRET_KEY is not set, using the development signing key")
            secret = DEV_SECRET_KEY

        return cls(
            news_api_key=os.getenv("NEWS_API_KEY") or os.getenv("API_KEY", ""),
            news_api_url=os.getenv("NEWS_API_URL", cls.news_api_url).rstrip("/"),
            news_api_timeout=float(os.getenv("NEWS_API_TIMEOUT", cls.news_api_timeout)),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            jwt_secret_key=secret,
            access_token_expire_minutes=int(
                os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", cls.access_token_expire_minutes)
            ),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
