# newsdesk_ui/main.py

import streamlit as st
from dotenv import load_dotenv
from newsdesk_ui.ui.login import login_page, logout, restore_session
from newsdesk_ui.ui.news import news_page
from newsdesk_ui.ui.saved import saved_page


load_dotenv()


st.set_page_config(page_title="Newsdesk", layout="wide")

def main_page():
    st.sidebar.markdown(f"## 👋 {st.session_state.get('username', '')}")

    if st.sidebar.button("📰 News"):
        st.session_state["page"] = "news"
    if st.sidebar.button("⭐ Saved"):
        st.session_state["page"] = "saved"
    if st.sidebar.button("🔓 Logout"):
        logout()
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "news")
    if page == "saved":
        saved_page()
    else:
        news_page()


restore_session()

if "token" not in st.session_state:
    login_page()
else:
    main_page()
