# newsdesk/api/saved.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from newsdesk.api.auth import get_current_user
from newsdesk.core import saved_articles
from newsdesk.core.errors import NotFound
from newsdesk.database import get_db
from newsdesk.schemas import ArticleOut, ArticlePayload


router = APIRouter(prefix="/api", tags=["saved"])


@router.post("/save", response_model=ArticleOut, status_code=status.HTTP_201_CREATED)
def save_article(
    payload: ArticlePayload,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return saved_articles.save_article(db, user_id, payload)


@router.get("/saved", response_model=list[ArticleOut])
def list_saved(user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    return saved_articles.list_saved(db, user_id)


@router.delete("/saved/{article_id}")
def remove_article(
    article_id: str,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not saved_articles.remove_article(db, user_id, article_id):
        raise NotFound("Article not found")
    return {"message": "Deleted"}
