# newsdesk_ui/ui/news.py

import streamlit as st
from newsdesk_ui.services.api import (
    fetch_all_news,
    fetch_country_news,
    fetch_top_headlines,
    save_article,
    total_pages,
)


CATEGORIES = ["general", "business", "entertainment", "health", "science", "sports", "technology"]

COUNTRIES = {
    "United States": "us",
    "United Kingdom": "gb",
    "India": "in",
    "Germany": "de",
    "France": "fr",
    "Japan": "jp",
    "Australia": "au",
    "Canada": "ca",
}

PAGE_SIZE = {"all": 12, "category": 12, "country": 6}


def _pager(key, total_results, page_size):
    page_key = f"{key}_page"
    page = st.session_state.get(page_key, 1)
    last_page = total_pages(total_results, page_size)

    prev_col, label_col, next_col = st.columns([1, 2, 1])
    if prev_col.button("← Prev", key=f"{key}_prev", disabled=page <= 1):
        st.session_state[page_key] = page - 1
        st.rerun()
    label_col.markdown(f"**{page} of {last_page}**")
    if next_col.button("Next →", key=f"{key}_next", disabled=page >= last_page):
        st.session_state[page_key] = page + 1
        st.rerun()


def _article_card(article, index):
    with st.container(border=True):
        if article.get("urlToImage"):
            st.image(article["urlToImage"], use_container_width=True)
        st.markdown(f"### [{article.get('title') or 'Untitled'}]({article.get('url')})")
        if article.get("description"):
            st.write(article["description"])

        source = article.get("source") or {}
        source_name = source.get("name") if isinstance(source, dict) else source
        st.caption(" · ".join(filter(None, [source_name, article.get("author"), article.get("publishedAt")])))

        if st.button("💾 Save", key=f"save_{index}_{article.get('url')}"):
            token = st.session_state.get("token")
            if not token:
                st.error("Please log in to save articles.")
                return
            result = save_article(token, article)
            if result["success"]:
                st.success(result["message"])
            else:
                st.error(result["message"])


def news_page():
    st.header("📰 News")

    mode = st.radio("Browse", ["All News", "Top Headlines", "Country"], horizontal=True)

    if mode == "All News":
        key = "all"
        query = st.text_input("Search", value=st.session_state.get("all_query", ""))
        if query != st.session_state.get("all_query", ""):
            st.session_state["all_query"] = query
            st.session_state["all_page"] = 1
        result = fetch_all_news(query or None, st.session_state.get("all_page", 1), PAGE_SIZE[key])
    elif mode == "Top Headlines":
        key = "category"
        category = st.selectbox("Category", CATEGORIES)
        if category != st.session_state.get("category_name"):
            st.session_state["category_name"] = category
            st.session_state["category_page"] = 1
        result = fetch_top_headlines(category, st.session_state.get("category_page", 1), PAGE_SIZE[key])
    else:
        key = "country"
        country = st.selectbox("Country", list(COUNTRIES))
        if country != st.session_state.get("country_name"):
            st.session_state["country_name"] = country
            st.session_state["country_page"] = 1
        result = fetch_country_news(COUNTRIES[country], st.session_state.get("country_page", 1), PAGE_SIZE[key])

    if not result.get("success"):
        st.error(f"Error fetching news: {result.get('message', 'An error occurred')}")
        return

    data = result.get("data") or {}
    articles = data.get("articles") or []
    if not articles:
        st.info("No articles found.")
        return

    for index, article in enumerate(articles):
        _article_card(article, index)

    _pager(key, data.get("totalResults", 0), PAGE_SIZE[key])
