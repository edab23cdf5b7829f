"""
Code block renderer - Titled, language-tagged code samples.

The code body is HTML-escaped and nothing else: no trimming, no
re-indentation, no template evaluation. Unescaping the rendered <code>
body gives back the authored text exactly.
"""

import html

from pglearn.schemas import CodeSample


# Language tags with highlighting support; anything else renders as plain text
KNOWN_LANGUAGES = {
    "sql",
    "plpgsql",
    "prisma",
    "typescript",
    "javascript",
    "json",
    "bash",
    "shell",
    "ini",
    "yaml",
    "python",
    "text",
}

PLAIN_LANGUAGE = "plaintext"


def get_code_css() -> str:
    """Get CSS styles for code block display."""
    return """
    <style>
    .code-block {
        margin-bottom: 1.5rem;
    }
    .code-block-title {
        font-size: 0.875rem;
        font-weight: 600;
        color: #3f3f46;
        margin: 0 0 0.5rem 0;
    }
    .code-block pre {
        background: #18181b;
        color: #f4f4f5;
        padding: 1rem;
        border-radius: 0.5rem;
        overflow-x: auto;
        margin: 0;
    }
    .code-block code {
        font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
        font-size: 0.875rem;
        line-height: 1.5;
        white-space: pre;
    }
    </style>
    """


def normalize_language(language: str) -> str:
    """Map a language tag to its highlighting class (unknown -> plaintext)."""
    tag = (language or "").strip().lower()
    return tag if tag in KNOWN_LANGUAGES else PLAIN_LANGUAGE


def render_code_block(title: str, language: str, code: str) -> str:
    """
    Render one code sample as HTML.

    Args:
        title: Label shown above the block (omitted when empty)
        language: Highlighting hint, never validated against the code
        code: Literal source text

    Returns:
        HTML string for the titled block
    """
    parts = ['<div class="code-block">']
    if title:
        parts.append(f'<h4 class="code-block-title">{html.escape(title)}</h4>')
    parts.append(
        f'<pre><code class="language-{normalize_language(language)}">'
        f'{html.escape(code)}'
        f'</code></pre>'
    )
    parts.append('</div>')
    return ''.join(parts)


def render_code_sample(sample: CodeSample) -> str:
    """Render a CodeSample block."""
    return render_code_block(sample.title, sample.language, sample.code)
