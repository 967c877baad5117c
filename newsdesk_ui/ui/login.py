# newsdesk_ui/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from newsdesk_ui.services.api import login_user, register_user
from newsdesk_ui import session

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "newsdesk-cookie-password")

cookies = EncryptedCookieManager(prefix="newsdesk/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def restore_session():
    return session.restore_session(st.session_state, cookies)


def logout():
    session.clear_session(st.session_state, cookies)


def _remember(token, username):
    st.session_state["token"] = token
    st.session_state["username"] = username
    cookies["token"] = token
    cookies["username"] = username
    cookies.save()


def login_page():
    st.title("🔐 Login")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        if not username or not password:
            st.error("Please fill out this field.")
            return
        with st.spinner("Please wait..."):
            result = login_user(username, password)
        if result.get("token"):
            _remember(result["token"], username)
            st.success("✅ Logged in")
            st.rerun()
        else:
            st.error(f"❌ {result.get('message', 'Authentication failed. Check credentials.')}")

    if st.button("Need an account? Register here."):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Create Account")

    new_user = st.text_input("Username", key="new_user")
    new_pass = st.text_input("Password", type="password", key="new_pass")

    if st.button("Register"):
        with st.spinner("Please wait..."):
            result = register_user(new_user, new_pass)
        if result.get("token"):
            _remember(result["token"], new_user)
            st.session_state["show_register"] = False
            st.rerun()
        else:
            st.error(f"❌ {result.get('message', 'Registration failed')}")

    if st.button("← Already have an account? Login here."):
        st.session_state["show_register"] = False
        st.rerun()
