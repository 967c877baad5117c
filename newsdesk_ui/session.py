# newsdesk_ui/session.py

from newsdesk_ui.services.api import get_user_info


SESSION_KEYS = ("token", "username")


def clear_session(session_state, cookie_store):
    for key in SESSION_KEYS:
        session_state.pop(key, None)
        if key in cookie_store:
            del cookie_store[key]
    cookie_store.save()


def restore_session(session_state, cookie_store) -> bool:
    """
    Copies a remembered token from the cookies into the session, but only
    after the backend still accepts it. A rejected token is dropped.
    """
    if "token" in session_state:
        return True

    token = cookie_store.get("token")
    if not token:
        return False

    user = get_user_info(token)
    if user is None:
        clear_session(session_state, cookie_store)
        return False

    session_state["token"] = token
    session_state["username"] = user.get("username") or cookie_store.get("username", "")
    return True
