# newsdesk_ui/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the Newsdesk backend
API_URL = os.getenv("NEWSDESK_API_URL", "http://localhost:5000").rstrip("/")

TIMEOUT = 30


def _auth_headers(token):
    return {"x-auth-token": token} if token else {}


def _json_or_error(response):
    """
    Decodes a backend response. Non-JSON bodies become an error dict so the
    pages can always read `success` and `message`.
    """
    try:
        return response.json()
    except ValueError:
        return {
            "status": response.status_code,
            "success": False,
            "message": f"Unexpected response from server ({response.status_code})",
        }


def _transport_error(e):
    return {"status": 0, "success": False, "message": f"Could not reach the server: {e}"}


# -------------------------------
# Authentication-related functions
# -------------------------------

def login_user(username, password):
    """
    Logs in a user. Returns {"token": ...} on success, otherwise an error dict.
    """
    try:
        res = requests.post(
            f"{API_URL}/api/auth/login",
            json={"username": username, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e)
    return _json_or_error(res)


def register_user(username, password):
    try:
        res = requests.post(
            f"{API_URL}/api/auth/register",
            json={"username": username, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e)
    return _json_or_error(res)


def get_user_info(token):
    """
    Retrieves the caller's identity, or None when the token is rejected.
    """
    try:
        res = requests.get(f"{API_URL}/api/auth/me", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return None
    return res.json() if res.status_code == 200 else None


# -------------------------
# News Browsing
# -------------------------

def fetch_all_news(query=None, page=1, page_size=12):
    params = {"page": page, "pageSize": page_size}
    if query:
        params["q"] = query
    try:
        res = requests.get(f"{API_URL}/all-news", params=params, timeout=TIMEOUT)
    except requests.RequestException as e:
        return _transport_error(e)
    return _json_or_error(res)


def fetch_top_headlines(category="general", page=1, page_size=12):
    params = {"category": category, "page": page, "pageSize": page_size}
    try:
        res = requests.get(f"{API_URL}/top-headlines", params=params, timeout=TIMEOUT)
    except requests.RequestException as e:
        return _transport_error(e)
    return _json_or_error(res)


def fetch_country_news(iso, page=1, page_size=6):
    params = {"page": page, "pageSize": page_size}
    try:
        res = requests.get(f"{API_URL}/country/{iso}", params=params, timeout=TIMEOUT)
    except requests.RequestException as e:
        return _transport_error(e)
    return _json_or_error(res)


def total_pages(total_results, page_size):
    if not total_results or page_size <= 0:
        return 1
    return max(1, -(-int(total_results) // page_size))


# -------------------------
# Saved Articles
# -------------------------

def to_saved_payload(article):
    """
    Maps a provider article onto the fields the backend stores.
    """
    return {
        "title": article.get("title"),
        "description": article.get("description"),
        "imgUrl": article.get("urlToImage") or article.get("imgUrl"),
        "url": article.get("url"),
        "source": article.get("source"),
        "author": article.get("author"),
        "publishedAt": article.get("publishedAt"),
    }


def save_article(token, article):
    try:
        res = requests.post(
            f"{API_URL}/api/save",
            json=to_saved_payload(article),
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e)

    data = _json_or_error(res)
    if res.status_code in (200, 201):
        return {"success": True, "message": "Article saved successfully!", "data": data}
    return {"success": False, "message": data.get("message", "Failed to save article. Try again.")}


def list_saved(token):
    """
    Lists the caller's saved articles.
    Returns {"success": True, "data": [...]} or an error dict carrying the
    HTTP status, so an expired session is not mistaken for an empty list.
    """
    try:
        res = requests.get(f"{API_URL}/api/saved", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        return _transport_error(e)

    data = _json_or_error(res)
    if res.status_code == 200 and isinstance(data, list):
        return {"status": 200, "success": True, "data": data}
    message = data.get("message") if isinstance(data, dict) else None
    return {
        "status": res.status_code,
        "success": False,
        "message": message or f"Failed to load saved articles ({res.status_code})",
    }


def remove_saved(token, article_id):
    try:
        res = requests.delete(
            f"{API_URL}/api/saved/{article_id}",
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e)

    data = _json_or_error(res)
    return {"success": res.status_code == 200, "message": data.get("message", "")}
