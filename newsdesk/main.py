# newsdesk/main.py

import logging
import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from newsdesk.api import auth, news, saved
from newsdesk.config import Settings
from newsdesk.core.errors import InvalidInput, NewsdeskError, StoreFailure
from newsdesk.core.news_gateway import NewsGateway
from newsdesk.database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger("newsdesk")


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


# -------------------------------
# Error Handlers
# -------------------------------

def _error_body(status_code: int, message: str, detail=None) -> dict:
    body = {"status": status_code, "success": False, "message": message}
    if detail is not None:
        body["error"] = detail
    return body


async def handle_newsdesk_error(request: Request, exc: NewsdeskError):
    # store diagnostics stay in the log, never in the response
    detail = None if exc.status_code >= 500 else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, exc.message, detail),
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store error on %s %s", request.method, request.url.path, exc_info=exc)
    error = StoreFailure()
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(error.status_code, error.message),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = [".".join(str(part) for part in err["loc"][1:]) for err in exc.errors()]
    error = InvalidInput(f"Missing or invalid field: {', '.join(f for f in fields if f) or 'body'}")
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(error.status_code, error.message),
    )


# -------------------------------
# Application Factory
# -------------------------------

def create_app(settings: Settings, news_gateway: NewsGateway | None = None) -> FastAPI:
    engine = create_db_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="Newsdesk")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.news_gateway = news_gateway or NewsGateway(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        logger.info("INCOMING | %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("ERROR | %s %s", request.method, request.url.path)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "RESPONSE | %s %s -> %s (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response

    app.add_exception_handler(NewsdeskError, handle_newsdesk_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    @app.get("/")
    def liveness():
        return {"status": 200, "success": True, "message": "Newsdesk API is running"}

    app.include_router(news.router)
    app.include_router(auth.router)
    app.include_router(saved.router)

    return app


def app_from_env() -> FastAPI:
    """Factory for `uvicorn --factory newsdesk.main:app_from_env`."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return create_app(settings)


def run():
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
