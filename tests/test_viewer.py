"""
Viewer tests: code blocks, navigation, lesson and page rendering.
"""

import html
import re

import pytest

from pglearn.classroom import Navigator
from pglearn.schemas import CodeSample, LessonContent, Paragraph, Callout
from pglearn.viewer import (
    PLAIN_LANGUAGE,
    get_page_metadata,
    normalize_language,
    render_block,
    render_code_block,
    render_code_sample,
    render_home,
    render_lesson,
    render_navigation,
    render_not_found,
    render_page,
)

from conftest import make_lesson_document


CODE_BODY = re.compile(r'<code class="language-[^"]*">(.*?)</code>', re.S)


def code_bodies(rendered: str) -> list[str]:
    """Unescaped text of every code block in rendered HTML."""
    return [html.unescape(body) for body in CODE_BODY.findall(rendered)]


class TestCodeBlock:
    """Test code sample rendering."""

    @pytest.mark.parametrize("code", [
        "SELECT * FROM users WHERE id = $1;",
        "const msg = `Hello ${user.name}`;",
        "  indented\n\n\ttabbed   \n",
        "WHERE a < b && c > d -- \"quoted\" 'single'",
        "",
    ])
    def test_code_text_preserved(self, code):
        rendered = render_code_block("Title", "sql", code)
        assert code_bodies(rendered) == [code]

    def test_markup_in_code_is_escaped(self):
        rendered = render_code_block("", "typescript", "<script>alert(1)</script>")
        assert "<script>" not in rendered
        assert "&lt;script&gt;" in rendered

    def test_title_rendered_and_escaped(self):
        rendered = render_code_block("Users & Posts", "prisma", "model User {}")
        assert '<h4 class="code-block-title">Users &amp; Posts</h4>' in rendered

    def test_empty_title_omitted(self):
        assert "code-block-title" not in render_code_block("", "sql", "SELECT 1;")

    def test_language_class(self):
        assert 'class="language-sql"' in render_code_block("", "SQL", "SELECT 1;")

    @pytest.mark.parametrize("language", ["cobol", "", "  "])
    def test_unknown_language_falls_back(self, language):
        assert normalize_language(language) == PLAIN_LANGUAGE
        rendered = render_code_block("", language, "x = 1")
        assert f'class="language-{PLAIN_LANGUAGE}"' in rendered
        assert code_bodies(rendered) == ["x = 1"]

    def test_render_code_sample(self):
        sample = CodeSample(title="Raw query", language="typescript", code="await prisma.$queryRaw`SELECT ${id}`")
        assert code_bodies(render_code_sample(sample)) == [sample.code]


class TestNavigationRenderer:
    """Test sidebar rendering."""

    def test_active_link_highlighted(self, small_catalog):
        tree = Navigator(small_catalog).get_navigation_tree("/lessons/b")
        rendered = render_navigation(tree, "Test Curriculum")
        assert rendered.count('class="nav-link active"') == 1
        assert '<a class="nav-link active" href="/lessons/b" target="_self" aria-current="page">B</a>' in rendered
        assert '<a class="nav-link" href="/lessons/a" target="_self">A</a>' in rendered

    def test_no_active_link(self, small_catalog):
        tree = Navigator(small_catalog).get_navigation_tree("/elsewhere")
        rendered = render_navigation(tree, "Test Curriculum")
        assert "active" not in rendered
        assert "aria-current" not in rendered

    def test_phase_titles_in_order(self, small_catalog):
        tree = Navigator(small_catalog).get_navigation_tree("")
        rendered = render_navigation(tree, "Test Curriculum")
        assert rendered.index("Phase 1") < rendered.index("Phase 2")
        assert rendered.index(">A<") < rendered.index(">B<") < rendered.index(">C &amp; D<")

    def test_href_mapping(self, small_catalog):
        tree = Navigator(small_catalog).get_navigation_tree("")
        rendered = render_navigation(tree, "T", href_for=lambda path: f"?path={path}")
        assert 'href="?path=/lessons/nested/c"' in rendered
        assert 'class="sidebar-title" href="?path=/"' in rendered

    def test_empty_tree(self):
        rendered = render_navigation([], "Empty")
        assert rendered.startswith('<nav class="sidebar">')
        assert "nav-phase" not in rendered


class TestLessonRenderer:
    """Test lesson content rendering."""

    def test_render_lesson(self):
        lesson = LessonContent.model_validate(make_lesson_document("/lessons/a", "A <b>"))
        rendered = render_lesson(lesson)
        assert "<h1>A &lt;b&gt;</h1>" in rendered
        assert "<h2>Example</h2>" in rendered
        assert "<p>Intro to <strong>A <b></strong>.</p>" in rendered
        assert code_bodies(rendered) == [
            "SELECT * FROM users\nWHERE id = $1;",
            "const msg = `Hello ${user.name} <admin>`;",
        ]

    def test_callout_tone_class(self):
        callout = Callout(tone="danger", blocks=[Paragraph(text="Do not")])
        assert render_block(callout) == '<div class="callout callout-danger"><p>Do not</p></div>'

    def test_page_metadata(self):
        lesson = LessonContent.model_validate(make_lesson_document("/lessons/a", "A"))
        assert get_page_metadata(lesson) == {"title": "A - Test", "description": "About A"}

    def test_shipped_code_samples_preserved(self, shipped_loader):
        lesson = shipped_loader.get_lesson_content("/lessons/copy")
        rendered = render_lesson(lesson)
        assert code_bodies(rendered) == [sample.code for sample in lesson.iter_code_samples()]
        assert any(
            "const csv = users.map(u => `${u.username},${u.email}`).join('\\n');" in body
            for body in code_bodies(rendered)
        )

    def test_shipped_template_marker_kept_literal(self, shipped_loader):
        lesson = shipped_loader.get_lesson_content("/lessons/textsearch-types")
        bodies = code_bodies(render_lesson(lesson))
        assert any("websearch_to_tsquery('english', ${term})" in body for body in bodies)


class TestPageRenderer:
    """Test full-page documents."""

    def test_render_page_head(self):
        document = render_page(
            "<p>Body</p>",
            '<nav class="sidebar"></nav>',
            {"title": "ALTER TABLE - PostgreSQL Learning", "description": 'Columns & "constraints"'},
        )
        assert document.startswith("<!DOCTYPE html>")
        assert "<title>ALTER TABLE - PostgreSQL Learning</title>" in document
        assert '<meta name="description" content="Columns &amp; &quot;constraints&quot;">' in document
        assert '<main class="page-main"><p>Body</p></main>' in document
        assert document.index('<nav class="sidebar">') < document.index('<main')

    def test_render_home(self, small_catalog):
        tree = Navigator(small_catalog).get_navigation_tree("/")
        rendered = render_home(tree, "Test Curriculum")
        assert "<h1>Test Curriculum</h1>" in rendered
        assert "2 phases, 3 lessons" in rendered
        assert 'href="/lessons/nested/c"' in rendered

    def test_render_not_found(self):
        rendered = render_not_found("/lessons/<x>")
        assert "<code>/lessons/&lt;x&gt;</code>" in rendered
        assert 'href="/"' in rendered

    def test_render_not_found_without_path(self):
        assert "The page you requested does not exist." in render_not_found("")
