"""
PostgreSQL Learning - Lessons in PostgreSQL with Prisma equivalents

Streamlit application serving the lesson catalog: a sidebar with every
phase and lesson, and the selected lesson's explanations and SQL/Prisma
code samples.

Usage:
    streamlit run app.py
    open http://localhost:8501/?path=/lessons/basic-select
"""

import html
import os
from pathlib import Path
from urllib.parse import quote

import streamlit as st
import yaml
from dotenv import load_dotenv

from pglearn.classroom import (
    HOME_PATH,
    ContentLoader,
    Navigator,
    build_route_table,
    normalize_path,
)
from pglearn.schemas import (
    DEFAULT_SITE_TITLE,
    Catalog,
    LessonContent,
    ContentBlock,
    CodeSample,
    Callout,
    Columns,
)
from pglearn.utils import CONTENT_DIR
from pglearn.viewer import (
    get_lesson_css,
    get_navigation_css,
    get_page_metadata,
    render_block,
    render_home,
    render_navigation,
    render_not_found,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

load_dotenv(Path(__file__).parent / ".env")

CONTENT_PATH = Path(os.environ.get("PGLEARN_CONTENT_DIR", CONTENT_DIR))
SITE_TITLE = os.environ.get("PGLEARN_SITE_TITLE")

PATH_PARAM = "path"


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Load catalog, route table and navigator once per session."""
    if "loader" not in st.session_state:
        st.session_state.load_error = None
        try:
            loader = ContentLoader(CONTENT_PATH)
            catalog = loader.load_catalog()
            st.session_state.routes = build_route_table(catalog, loader)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            st.session_state.loader = None
            st.session_state.load_error = str(e)
        else:
            st.session_state.loader = loader
            st.session_state.catalog = catalog
            st.session_state.navigator = Navigator(catalog)


def query_href(path: str) -> str:
    """Link target inside the app: the route travels in the query string."""
    if path == HOME_PATH:
        return "?"
    return f"?{PATH_PARAM}={quote(path)}"


def get_current_path() -> str:
    """Current route from the query string (default: home)."""
    return normalize_path(st.query_params.get(PATH_PARAM, HOME_PATH))


def markdown_html(fragment: str) -> str:
    """Prepare an HTML fragment for st.markdown (keep $ out of math mode)."""
    return fragment.replace("$", "&#36;")


def select_path(path: str):
    """Navigate to another route."""
    if path == HOME_PATH:
        st.query_params.clear()
    else:
        st.query_params[PATH_PARAM] = path
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Curriculum Tree
# -----------------------------------------------------------------------------

def render_sidebar(catalog: Catalog, navigator: Navigator, current_path: str):
    """Render the sidebar with every phase and lesson."""
    tree = navigator.get_navigation_tree(current_path)
    st.sidebar.markdown(get_navigation_css(), unsafe_allow_html=True)
    # Streamlit owns the sidebar frame; let the nav flow inside it
    st.sidebar.markdown(
        """
        <style>
        .sidebar { position: static; width: auto; height: auto; border-radius: 0.5rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.sidebar.markdown(
        markdown_html(render_navigation(tree, catalog.title, href_for=query_href)),
        unsafe_allow_html=True,
    )


# -----------------------------------------------------------------------------
# Main Content: Lesson View
# -----------------------------------------------------------------------------

def render_blocks(blocks: list[ContentBlock]):
    """Render content blocks with native Streamlit elements where they help."""
    for block in blocks:
        if isinstance(block, CodeSample):
            if block.title:
                st.markdown(markdown_html(f"<strong>{html.escape(block.title)}</strong>"), unsafe_allow_html=True)
            # st.code highlights known languages and shows plain text otherwise
            st.code(block.code, language=block.language or None)
        elif isinstance(block, Callout):
            with st.container(border=True):
                render_blocks(block.blocks)
        elif isinstance(block, Columns):
            columns = st.columns(2)
            for idx, child in enumerate(block.blocks):
                with columns[idx % 2]:
                    render_blocks([child])
        else:
            st.markdown(markdown_html(render_block(block)), unsafe_allow_html=True)


def render_lesson_view(lesson: LessonContent):
    """Render the main lesson content."""
    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.title(lesson.heading)
    if lesson.metadata.description:
        st.caption(markdown_html(html.escape(lesson.metadata.description)), unsafe_allow_html=True)
    render_blocks(lesson.intro)

    for section in lesson.sections:
        if section.title:
            st.header(section.title, divider="gray")
        render_blocks(section.blocks)


def render_navigation_bar(navigator: Navigator, path: str):
    """Render navigation bar with prev/next buttons."""
    pos, total = navigator.get_lesson_position(path)

    prev_lesson = navigator.get_previous_lesson(path)
    next_lesson = navigator.get_next_lesson(path)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if prev_lesson:
            if st.button("← Previous", help=prev_lesson.title, use_container_width=True):
                select_path(prev_lesson.path)

    with col2:
        st.markdown(f"<center>Lesson {pos} of {total}</center>", unsafe_allow_html=True)

    with col3:
        if next_lesson:
            if st.button("Next →", help=next_lesson.title, use_container_width=True):
                select_path(next_lesson.path)

    st.divider()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    current_path = get_current_path()

    if not st.session_state.loader:
        st.set_page_config(page_title=SITE_TITLE or DEFAULT_SITE_TITLE, page_icon="🐘", layout="wide")
        st.error(f"Could not load lesson content from {CONTENT_PATH}: {st.session_state.load_error}")
        st.code("python scripts/build_site.py --check", language="bash")
        return

    catalog = st.session_state.catalog
    navigator = st.session_state.navigator
    site_title = SITE_TITLE or catalog.title

    if current_path == HOME_PATH:
        st.set_page_config(page_title=site_title, page_icon="🐘", layout="wide")
        render_sidebar(catalog, navigator, current_path)
        tree = navigator.get_navigation_tree(current_path)
        st.markdown(get_lesson_css(), unsafe_allow_html=True)
        st.markdown(markdown_html(render_home(tree, site_title, href_for=query_href)), unsafe_allow_html=True)
        return

    route = st.session_state.routes.resolve(current_path)
    lesson = route.load() if route else None

    if not lesson:
        st.set_page_config(page_title=f"Page not found - {site_title}", page_icon="🐘", layout="wide")
        render_sidebar(catalog, navigator, current_path)
        st.markdown(get_lesson_css(), unsafe_allow_html=True)
        st.markdown(markdown_html(render_not_found(current_path, href_for=query_href)), unsafe_allow_html=True)
        return

    metadata = get_page_metadata(lesson)
    st.set_page_config(page_title=metadata["title"], page_icon="🐘", layout="wide")
    render_sidebar(catalog, navigator, route.path)
    render_navigation_bar(navigator, route.path)
    render_lesson_view(lesson)


if __name__ == "__main__":
    main()
