"""
Lesson renderer - Generate HTML for lesson pages.

Features:
- Heading, intro and titled sections
- Prose blocks (paragraphs, lists, tables) with authored inline HTML
- Tinted callout boxes and two-column layouts
- Code samples via the code block renderer
"""

import html

from pglearn.schemas import (
    LessonContent,
    Section,
    ContentBlock,
    Paragraph,
    Heading,
    BulletList,
    Table,
    CodeSample,
    Callout,
    Columns,
)

from .code_block import get_code_css, render_code_sample


# Callout tone to CSS class mapping
CALLOUT_TONE_CLASSES = {
    "neutral": "callout-neutral",    # Grey
    "info": "callout-info",          # Blue
    "warning": "callout-warning",    # Yellow
    "danger": "callout-danger",      # Red
    "success": "callout-success",    # Green
    "caution": "callout-caution",    # Orange
}


def get_lesson_css() -> str:
    """Get CSS styles for lesson content."""
    return """
    <style>
    .lesson {
        line-height: 1.7;
        color: #27272a;
    }
    .lesson h1 {
        font-size: 2.25rem;
        font-weight: 700;
        margin-bottom: 1.5rem;
    }
    .lesson-section {
        margin-bottom: 2rem;
    }
    .lesson-section h2 {
        font-size: 1.5rem;
        font-weight: 600;
        margin-bottom: 1rem;
    }
    .lesson h3 {
        font-size: 1.125rem;
        font-weight: 600;
        margin: 1.25rem 0 0.5rem 0;
    }
    .lesson p {
        margin: 0 0 1rem 0;
    }
    .lesson ul, .lesson ol {
        padding-left: 1.5rem;
        margin: 0 0 1rem 0;
    }
    .lesson li {
        margin: 0.25rem 0;
    }
    .lesson :not(pre) > code {
        background: #e4e4e7;
        padding: 0 0.25rem;
        border-radius: 0.25rem;
    }
    .lesson table {
        width: 100%;
        font-size: 0.875rem;
        border-collapse: collapse;
        margin-bottom: 1rem;
    }
    .lesson th, .lesson td {
        text-align: left;
        padding: 0.5rem;
        border-bottom: 1px solid #e4e4e7;
    }
    .callout {
        padding: 1rem;
        border-radius: 0.5rem;
        margin-bottom: 1rem;
        font-size: 0.925rem;
    }
    .callout > :last-child {
        margin-bottom: 0;
    }
    .callout-neutral { background: #f4f4f5; }
    .callout-info { background: #eff6ff; }
    .callout-warning { background: #fefce8; }
    .callout-danger { background: #fef2f2; }
    .callout-success { background: #f0fdf4; }
    .callout-caution { background: #fff7ed; }
    .columns {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(18rem, 1fr));
        gap: 1rem;
        margin-bottom: 1rem;
    }
    </style>
    """


def render_paragraph(block: Paragraph) -> str:
    """Render a paragraph (text is authored inline HTML)."""
    return f'<p>{block.text}</p>'


def render_heading(block: Heading) -> str:
    return f'<h{block.level}>{block.text}</h{block.level}>'


def render_list(block: BulletList) -> str:
    tag = "ol" if block.ordered else "ul"
    items = ''.join(f'<li>{item}</li>' for item in block.items)
    return f'<{tag}>{items}</{tag}>'


def render_table(block: Table) -> str:
    """Render a table with optional header row."""
    parts = ['<table>']
    if block.headers:
        cells = ''.join(f'<th>{cell}</th>' for cell in block.headers)
        parts.append(f'<thead><tr>{cells}</tr></thead>')
    parts.append('<tbody>')
    for row in block.rows:
        cells = ''.join(f'<td>{cell}</td>' for cell in row)
        parts.append(f'<tr>{cells}</tr>')
    parts.append('</tbody></table>')
    return ''.join(parts)


def render_callout(block: Callout) -> str:
    css_class = CALLOUT_TONE_CLASSES.get(block.tone, "callout-neutral")
    inner = ''.join(render_block(child) for child in block.blocks)
    return f'<div class="callout {css_class}">{inner}</div>'


def render_columns(block: Columns) -> str:
    inner = ''.join(f'<div>{render_block(child)}</div>' for child in block.blocks)
    return f'<div class="columns">{inner}</div>'


def render_block(block: ContentBlock) -> str:
    """Render any content block."""
    if isinstance(block, Paragraph):
        return render_paragraph(block)
    elif isinstance(block, Heading):
        return render_heading(block)
    elif isinstance(block, BulletList):
        return render_list(block)
    elif isinstance(block, Table):
        return render_table(block)
    elif isinstance(block, CodeSample):
        return render_code_sample(block)
    elif isinstance(block, Callout):
        return render_callout(block)
    elif isinstance(block, Columns):
        return render_columns(block)
    else:
        return f"<p>Unknown block type: {html.escape(str(type(block)))}</p>"


def render_section(section: Section) -> str:
    """Render a titled section."""
    parts = ['<section class="lesson-section">']
    if section.title:
        parts.append(f'<h2>{html.escape(section.title)}</h2>')
    for block in section.blocks:
        parts.append(render_block(block))
    parts.append('</section>')
    return ''.join(parts)


def render_lesson(lesson: LessonContent) -> str:
    """
    Render complete lesson content as HTML.

    Args:
        lesson: LessonContent object

    Returns:
        HTML string for the lesson body (without sidebar)
    """
    parts = ['<article class="lesson">']
    parts.append(f'<h1>{html.escape(lesson.heading)}</h1>')

    for block in lesson.intro:
        parts.append(render_block(block))

    for section in lesson.sections:
        parts.append(render_section(section))

    parts.append('</article>')
    return ''.join(parts)


def get_page_metadata(lesson: LessonContent) -> dict[str, str]:
    """Page metadata for the host: title and description, unmodified."""
    return {
        "title": lesson.metadata.title,
        "description": lesson.metadata.description,
    }


def get_content_css() -> str:
    """All CSS needed by lesson content (prose + code blocks)."""
    return get_lesson_css() + get_code_css()
