"""
Unit tests for restoring a remembered login from cookies.
"""
from unittest.mock import MagicMock, patch

from newsdesk_ui import session


class FakeCookies(dict):
    """Dict-backed stand-in for the encrypted cookie manager."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.save = MagicMock()


class TestRestoreSession:

    @patch("newsdesk_ui.session.get_user_info")
    def test_valid_cookie_token_is_restored(self, mock_info):
        mock_info.return_value = {"id": "u1", "username": "alice"}
        state, cookies = {}, FakeCookies(token="good", username="alice")

        assert session.restore_session(state, cookies) is True

        assert state == {"token": "good", "username": "alice"}
        mock_info.assert_called_once_with("good")

    @patch("newsdesk_ui.session.get_user_info")
    def test_expired_cookie_token_is_dropped(self, mock_info):
        mock_info.return_value = None
        state, cookies = {}, FakeCookies(token="expired", username="alice")

        assert session.restore_session(state, cookies) is False

        assert "token" not in state
        assert "token" not in cookies
        assert "username" not in cookies
        cookies.save.assert_called_once()

    @patch("newsdesk_ui.session.get_user_info")
    def test_no_cookie(self, mock_info):
        state, cookies = {}, FakeCookies()
        assert session.restore_session(state, cookies) is False
        mock_info.assert_not_called()

    @patch("newsdesk_ui.session.get_user_info")
    def test_existing_session_is_kept(self, mock_info):
        state, cookies = {"token": "live"}, FakeCookies(token="other")
        assert session.restore_session(state, cookies) is True
        assert state["token"] == "live"
        mock_info.assert_not_called()


class TestClearSession:

    def test_clears_state_and_cookies(self):
        state = {"token": "t", "username": "alice", "page": "saved"}
        cookies = FakeCookies(token="t", username="alice")

        session.clear_session(state, cookies)

        assert state == {"page": "saved"}
        assert dict(cookies) == {}
        cookies.save.assert_called_once()
