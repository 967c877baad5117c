"""
Unit tests for the saved-article service and its store constraints.
"""
import pytest
from sqlalchemy.exc import IntegrityError

from newsdesk.core import auth, saved_articles
from newsdesk.core.errors import Conflict, InvalidInput, Unauthorized
from newsdesk.models.article import Article
from newsdesk.models.user import User
from newsdesk.schemas import ArticlePayload


def payload(url, **fields):
    return ArticlePayload(url=url, title=fields.pop("title", f"Title {url}"), **fields)


@pytest.fixture
def make_user(db, settings):
    def _make_user(username):
        token = auth.register(db, settings, username, "s3cret-pass")
        return auth.verify_token(token, settings)
    return _make_user


class TestSaveArticle:

    def test_save_copies_payload_fields(self, db, make_user):
        user_id = make_user("alice")
        article = saved_articles.save_article(db, user_id, ArticlePayload(
            title="Headline",
            description="Body",
            imgUrl="https://img.example/1.jpg",
            url="https://news.example/1",
            source={"id": "bbc-news", "name": "BBC News"},
            author="Reporter",
            publishedAt="2024-05-01T10:00:00Z",
        ))

        assert article.id
        assert article.owner_id == user_id
        assert article.title == "Headline"
        assert article.img_url == "https://img.example/1.jpg"
        assert article.source == "BBC News"
        assert article.published_at == "2024-05-01T10:00:00Z"
        assert article.saved_at is not None

    def test_duplicate_url_for_same_user_conflicts(self, db, make_user):
        user_id = make_user("alice")
        saved_articles.save_article(db, user_id, payload("x"))

        with pytest.raises(Conflict):
            saved_articles.save_article(db, user_id, payload("x"))

        saved = saved_articles.list_saved(db, user_id)
        assert [a.url for a in saved] == ["x"]

    def test_same_url_for_two_users_creates_two_records(self, db, make_user):
        alice, bob = make_user("alice"), make_user("bob")

        first = saved_articles.save_article(db, alice, payload("x"))
        second = saved_articles.save_article(db, bob, payload("x"))

        assert first.id != second.id
        assert db.query(Article).filter_by(url="x").count() == 2

    def test_blank_url_is_invalid(self, db, make_user):
        user_id = make_user("alice")
        with pytest.raises(InvalidInput):
            saved_articles.save_article(db, user_id, payload("   "))

    def test_unknown_user_is_unauthorized(self, db):
        with pytest.raises(Unauthorized):
            saved_articles.save_article(db, "ghost", payload("x"))

    def test_store_rejects_duplicate_owner_url(self, db, make_user):
        user_id = make_user("alice")
        saved_articles.save_article(db, user_id, payload("x"))

        db.add(Article(owner_id=user_id, url="x", position=5))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()


class TestListSaved:

    def test_empty_list(self, db, make_user):
        assert saved_articles.list_saved(db, make_user("alice")) == []

    def test_insertion_order_is_stable(self, db, make_user):
        user_id = make_user("alice")
        for url in ["c", "a", "b"]:
            saved_articles.save_article(db, user_id, payload(url))

        first = [a.url for a in saved_articles.list_saved(db, user_id)]
        second = [a.url for a in saved_articles.list_saved(db, user_id)]
        assert first == second == ["c", "a", "b"]

    def test_order_survives_a_fresh_session(self, app, db, make_user):
        user_id = make_user("alice")
        for url in ["c", "a", "b"]:
            saved_articles.save_article(db, user_id, payload(url))

        other = app.state.session_factory()
        try:
            assert [a.url for a in saved_articles.list_saved(other, user_id)] == ["c", "a", "b"]
            assert other.get(User, user_id).saved_article_refs == [
                a.id for a in saved_articles.list_saved(db, user_id)
            ]
        finally:
            other.close()


class TestRemoveArticle:

    def test_remove_deletes_reference_and_record(self, db, make_user):
        user_id = make_user("alice")
        keep = saved_articles.save_article(db, user_id, payload("a"))
        gone = saved_articles.save_article(db, user_id, payload("b"))

        assert saved_articles.remove_article(db, user_id, gone.id) is True

        assert [a.id for a in saved_articles.list_saved(db, user_id)] == [keep.id]
        assert db.get(Article, gone.id) is None

    def test_unknown_id_is_a_no_op(self, db, make_user):
        user_id = make_user("alice")
        saved_articles.save_article(db, user_id, payload("a"))

        assert saved_articles.remove_article(db, user_id, "does-not-exist") is False
        assert [a.url for a in saved_articles.list_saved(db, user_id)] == ["a"]

    def test_cannot_remove_another_users_article(self, db, make_user):
        alice, bob = make_user("alice"), make_user("bob")
        bobs = saved_articles.save_article(db, bob, payload("x"))

        assert saved_articles.remove_article(db, alice, bobs.id) is False
        assert db.get(Article, bobs.id) is not None
        assert [a.id for a in saved_articles.list_saved(db, bob)] == [bobs.id]

    def test_url_can_be_saved_again_after_removal(self, db, make_user):
        user_id = make_user("alice")
        first = saved_articles.save_article(db, user_id, payload("x"))
        saved_articles.remove_article(db, user_id, first.id)

        again = saved_articles.save_article(db, user_id, payload("x"))
        assert again.id != first.id
