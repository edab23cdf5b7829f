"""
Navigation renderer - Sidebar with the curriculum tree.

Each phase title is a plain header; each lesson is a link to its path.
The active lesson gets the highlighted style and aria-current="page".
"""

import html
from typing import Callable

from pglearn.classroom import HOME_PATH, NavigationPhase


def get_navigation_css() -> str:
    """Get CSS styles for the sidebar."""
    return """
    <style>
    .sidebar {
        width: 16rem;
        background: #18181b;
        color: #f4f4f5;
        height: 100vh;
        position: fixed;
        left: 0;
        top: 0;
        overflow-y: auto;
        overflow-x: hidden;
    }
    .sidebar-header {
        padding: 1rem;
        border-bottom: 1px solid #3f3f46;
        position: sticky;
        top: 0;
        background: #18181b;
        z-index: 10;
    }
    .sidebar-title {
        font-size: 1.25rem;
        font-weight: 700;
        color: inherit;
        text-decoration: none;
    }
    .sidebar-title:hover {
        color: #60a5fa;
    }
    .sidebar-body {
        padding: 1rem;
    }
    .nav-phase {
        margin-bottom: 1.5rem;
    }
    .nav-phase-title {
        font-size: 0.875rem;
        font-weight: 600;
        color: #a1a1aa;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin: 0 0 0.5rem 0;
    }
    .nav-lessons {
        list-style: none;
        margin: 0;
        padding: 0;
    }
    .nav-link {
        display: block;
        padding: 0.5rem 0.75rem;
        border-radius: 0.375rem;
        font-size: 0.875rem;
        color: #d4d4d8;
        text-decoration: none;
        transition: background-color 0.15s;
    }
    .nav-link:hover {
        background: #27272a;
        color: #ffffff;
    }
    .nav-link.active {
        background: #2563eb;
        color: #ffffff;
    }
    </style>
    """


def identity_href(path: str) -> str:
    return path


def render_navigation(
    tree: list[NavigationPhase],
    site_title: str,
    href_for: Callable[[str], str] = identity_href,
) -> str:
    """
    Render the sidebar.

    Args:
        tree: Output of build_navigation() / Navigator.get_navigation_tree()
        site_title: Title shown at the top, linking to the home page
        href_for: Maps a route path to a link target (static export and the
            Streamlit app address pages differently)

    Returns:
        HTML string for the <nav> element
    """
    parts = ['<nav class="sidebar">']
    parts.append(
        f'<div class="sidebar-header">'
        f'<a class="sidebar-title" href="{html.escape(href_for(HOME_PATH))}" target="_self">'
        f'{html.escape(site_title)}</a></div>'
    )
    parts.append('<div class="sidebar-body">')

    for nav_phase in tree:
        parts.append('<div class="nav-phase">')
        parts.append(f'<h3 class="nav-phase-title">{html.escape(nav_phase.phase.title)}</h3>')
        parts.append('<ul class="nav-lessons">')
        for nav_lesson in nav_phase.lessons:
            lesson = nav_lesson.lesson
            href = html.escape(href_for(lesson.path))
            if nav_lesson.is_active:
                link = f'<a class="nav-link active" href="{href}" target="_self" aria-current="page">'
            else:
                link = f'<a class="nav-link" href="{href}" target="_self">'
            parts.append(f'<li>{link}{html.escape(lesson.title)}</a></li>')
        parts.append('</ul></div>')

    parts.append('</div></nav>')
    return ''.join(parts)
