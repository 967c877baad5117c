# newsdesk/api/news.py

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from newsdesk.core.news_gateway import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    NewsGateway,
    parse_page_param,
)
from newsdesk.schemas import Envelope


router = APIRouter(tags=["news"])


# -------------------------------
# Upstream Proxy Endpoints
# -------------------------------

def _gateway(request: Request) -> NewsGateway:
    return request.app.state.news_gateway


def _pagination(request: Request) -> tuple[int, int]:
    page = parse_page_param(request.query_params.get("page"), DEFAULT_PAGE)
    page_size = parse_page_param(request.query_params.get("pageSize"), DEFAULT_PAGE_SIZE)
    return page, page_size


def _respond(result: Envelope) -> JSONResponse:
    return JSONResponse(status_code=result.status, content=result.to_response())


@router.get("/all-news")
def all_news(request: Request, q: str | None = None):
    page, page_size = _pagination(request)
    return _respond(_gateway(request).fetch_everything(q, page, page_size))


@router.get("/top-headlines")
def top_headlines(request: Request, category: str | None = None):
    page, page_size = _pagination(request)
    return _respond(_gateway(request).fetch_top_headlines(category, page, page_size))


@router.get("/country/{iso}")
def country_news(request: Request, iso: str):
    page, page_size = _pagination(request)
    return _respond(_gateway(request).fetch_country(iso, page, page_size))
