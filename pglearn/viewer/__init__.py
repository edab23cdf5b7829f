"""
PostgreSQL Learning Viewer - Rendering components for the lesson site.

This module provides:
- Code sample blocks
- Sidebar navigation
- Lesson content rendering and page metadata
- Page wrapper, landing and not-found pages
- Static site export
"""

from .code_block import (
    KNOWN_LANGUAGES,
    PLAIN_LANGUAGE,
    get_code_css,
    normalize_language,
    render_code_block,
    render_code_sample,
)

from .navigation import (
    get_navigation_css,
    identity_href,
    render_navigation,
)

from .lesson import (
    CALLOUT_TONE_CLASSES,
    get_lesson_css,
    get_content_css,
    render_paragraph,
    render_heading,
    render_list,
    render_table,
    render_callout,
    render_columns,
    render_block,
    render_section,
    render_lesson,
    get_page_metadata,
)

from .page import (
    get_page_css,
    render_page,
    render_home,
    render_not_found,
)

from .site import (
    DEFAULT_OUTPUT_DIR,
    ContentCheck,
    BuildReport,
    make_static_href,
    page_file,
    check_clean_target,
    check_content,
    build_site,
)

__all__ = [
    # Code blocks
    "KNOWN_LANGUAGES",
    "PLAIN_LANGUAGE",
    "get_code_css",
    "normalize_language",
    "render_code_block",
    "render_code_sample",
    # Navigation
    "get_navigation_css",
    "identity_href",
    "render_navigation",
    # Lesson rendering
    "CALLOUT_TONE_CLASSES",
    "get_lesson_css",
    "get_content_css",
    "render_paragraph",
    "render_heading",
    "render_list",
    "render_table",
    "render_callout",
    "render_columns",
    "render_block",
    "render_section",
    "render_lesson",
    "get_page_metadata",
    # Page
    "get_page_css",
    "render_page",
    "render_home",
    "render_not_found",
    # Static export
    "DEFAULT_OUTPUT_DIR",
    "ContentCheck",
    "BuildReport",
    "make_static_href",
    "page_file",
    "check_clean_target",
    "check_content",
    "build_site",
]
