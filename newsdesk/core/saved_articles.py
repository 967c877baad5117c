# newsdesk/core/saved_articles.py

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from newsdesk.core.auth import get_user
from newsdesk.core.errors import Conflict, InvalidInput, StoreFailure
from newsdesk.models.article import Article
from newsdesk.schemas import ArticlePayload


logger = logging.getLogger(__name__)


def save_article(db: Session, user_id: str, payload: ArticlePayload) -> Article:
    """
    Saves a snapshot of an article into the user's reference list.
    A URL can be saved once per user; other users may save the same URL.
    """
    if not payload.url or not payload.url.strip():
        raise InvalidInput("Article url is required")

    user = get_user(db, user_id)
    if any(saved.url == payload.url for saved in user.saved_articles):
        raise Conflict("Already saved")

    article = Article(
        title=payload.title,
        description=payload.description,
        img_url=payload.img_url,
        url=payload.url,
        source=payload.source,
        author=payload.author,
        published_at=payload.published_at,
    )
    user.saved_articles.append(article)

    try:
        db.commit()
    except IntegrityError:
        # a concurrent save of the same url won the race
        db.rollback()
        raise Conflict("Already saved")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save article for user %s", user_id)
        raise StoreFailure(detail=str(e))

    logger.info("User %s saved article %s", user_id, article.id)
    return article


def list_saved(db: Session, user_id: str) -> list[Article]:
    user = get_user(db, user_id)
    return list(user.saved_articles)


def remove_article(db: Session, user_id: str, article_id: str) -> bool:
    """
    Removes an article from the user's reference list and deletes the record.
    Ids outside the caller's list are left untouched and return False.
    """
    user = get_user(db, user_id)
    article = next((saved for saved in user.saved_articles if saved.id == article_id), None)
    if article is None:
        return False

    user.saved_articles.remove(article)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to remove article %s for user %s", article_id, user_id)
        raise StoreFailure(detail=str(e))

    logger.info("User %s removed article %s", user_id, article_id)
    return True
