"""
Page wrapper - Compose the sidebar and a content region into a full page.

Provides:
- Full HTML documents with page metadata (title, description)
- Landing page listing the whole curriculum
- Not-found page for unregistered routes
"""

import html
from typing import Callable

from pglearn.classroom import HOME_PATH, NavigationPhase

from .lesson import get_content_css
from .navigation import get_navigation_css, identity_href


def get_page_css() -> str:
    """Get CSS styles for the page layout."""
    return """
    <style>
    body {
        margin: 0;
        font-family: ui-sans-serif, system-ui, -apple-system, "Segoe UI", sans-serif;
        background: #ffffff;
    }
    .page {
        display: flex;
    }
    .page-main {
        flex: 1;
        margin-left: 16rem;
        padding: 2rem;
        max-width: 64rem;
    }
    .home-phases {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(16rem, 1fr));
        gap: 1rem;
    }
    .home-phase {
        border: 1px solid #e4e4e7;
        border-radius: 0.5rem;
        padding: 1rem;
    }
    .home-phase h2 {
        font-size: 1rem;
        margin: 0 0 0.5rem 0;
    }
    .home-phase ul {
        margin: 0;
        padding-left: 1.25rem;
        font-size: 0.875rem;
    }
    </style>
    """


def render_page(content_html: str, navigation_html: str, metadata: dict[str, str]) -> str:
    """
    Render a complete HTML document.

    Args:
        content_html: Pre-rendered page body (treated as opaque)
        navigation_html: Pre-rendered sidebar
        metadata: {"title": ..., "description": ...} for the document head

    Returns:
        HTML document string
    """
    title = html.escape(metadata.get("title", ""))
    description = html.escape(metadata.get("description", ""))
    return (
        '<!DOCTYPE html>\n'
        '<html lang="en">\n'
        '<head>\n'
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f'<title>{title}</title>\n'
        f'<meta name="description" content="{description}">\n'
        f'{get_page_css()}{get_navigation_css()}{get_content_css()}\n'
        '</head>\n'
        '<body>\n'
        '<div class="page">'
        f'{navigation_html}'
        f'<main class="page-main">{content_html}</main>'
        '</div>\n'
        '</body>\n'
        '</html>\n'
    )


def render_home(
    tree: list[NavigationPhase],
    site_title: str,
    href_for: Callable[[str], str] = identity_href,
) -> str:
    """Render the landing page body: every phase with its lessons."""
    total = sum(len(nav_phase.lessons) for nav_phase in tree)
    parts = ['<article class="lesson">']
    parts.append(f'<h1>{html.escape(site_title)}</h1>')
    parts.append(
        f'<p>{len(tree)} phases, {total} lessons: PostgreSQL from the basics to '
        f'replication, with Prisma equivalents for every concept.</p>'
    )
    parts.append('<div class="home-phases">')
    for nav_phase in tree:
        parts.append('<div class="home-phase">')
        parts.append(f'<h2>{html.escape(nav_phase.phase.title)}</h2><ul>')
        for nav_lesson in nav_phase.lessons:
            lesson = nav_lesson.lesson
            parts.append(
                f'<li><a href="{html.escape(href_for(lesson.path))}" target="_self">'
                f'{html.escape(lesson.title)}</a></li>'
            )
        parts.append('</ul></div>')
    parts.append('</div></article>')
    return ''.join(parts)


def render_not_found(path: str, href_for: Callable[[str], str] = identity_href) -> str:
    """Render the body for an unregistered route (path may be unknown)."""
    if path:
        message = f'No lesson is published at <code>{html.escape(path)}</code>.'
    else:
        message = 'The page you requested does not exist.'
    return (
        '<article class="lesson">'
        '<h1>Page not found</h1>'
        f'<p>{message}</p>'
        f'<p><a href="{html.escape(href_for(HOME_PATH))}" target="_self">Back to the curriculum</a></p>'
        '</article>'
    )
