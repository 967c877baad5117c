# newsdesk_ui/ui/saved.py

import streamlit as st
from newsdesk_ui.services.api import list_saved, remove_saved
from newsdesk_ui.ui.login import logout


def saved_page():
    st.header("⭐ Saved Articles")

    token = st.session_state.get("token")
    if not token:
        st.info("You must be logged in to view your saved articles.")
        return

    result = list_saved(token)
    if not result["success"]:
        if result.get("status") == 401:
            logout()
            st.warning("Your session has expired. Please log in again.")
            if st.button("Go to login"):
                st.rerun()
        else:
            st.error(result["message"])
        return

    articles = result["data"]
    if not articles:
        st.write("No saved articles.")
        return

    for article in articles:
        with st.container(border=True):
            if article.get("imgUrl"):
                st.image(article["imgUrl"], use_container_width=True)
            st.markdown(f"### [{article.get('title') or 'Untitled'}]({article.get('url')})")
            if article.get("description"):
                st.write(article["description"])
            st.caption(" · ".join(filter(None, [article.get("source"), article.get("author"), article.get("publishedAt")])))

            if st.button("🗑️ Remove", key=f"remove_{article['id']}"):
                result = remove_saved(token, article["id"])
                if result["success"]:
                    st.rerun()
                else:
                    st.error(result["message"] or "Failed to remove article")
