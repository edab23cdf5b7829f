"""
Static export tests: build_site() and the build_site.py command line.
"""

import json
from pathlib import Path

import pytest

from pglearn.classroom import ContentLoader, MissingLessonError
from pglearn.viewer import (
    build_site,
    check_clean_target,
    check_content,
    make_static_href,
    page_file,
)

from conftest import SMALL_CATALOG, write_content_dir
from scripts.build_site import main


class TestStaticHref:
    """Test link targets for exported pages."""

    def test_root_base(self):
        href_for = make_static_href("/")
        assert href_for("/") == "/"
        assert href_for("/lessons/joins") == "/lessons/joins/"

    def test_prefixed_base(self):
        href_for = make_static_href("/pg-learning/")
        assert href_for("/") == "/pg-learning/"
        assert href_for("/lessons/practical-queries/joins") == "/pg-learning/lessons/practical-queries/joins/"

    def test_page_file(self, tmp_path):
        assert page_file(tmp_path, "/") == tmp_path / "index.html"
        assert page_file(tmp_path, "/lessons/nested/c") == tmp_path / "lessons" / "nested" / "c" / "index.html"


class TestCheckContent:
    """Test content validation without writing."""

    def test_check_content(self, loader):
        check = check_content(loader)
        assert check.routes.paths() == ["/lessons/a", "/lessons/b", "/lessons/nested/c"]
        assert set(check.lessons) == set(check.routes.paths())
        assert check.orphan_paths == []

    def test_orphan_documents_reported(self, loader):
        orphan = loader.lessons_dir / "extra.json"
        orphan.write_text((loader.lessons_dir / "a.json").read_text(encoding="utf-8"), encoding="utf-8")
        assert check_content(loader).orphan_paths == ["/lessons/extra"]

    def test_missing_document_fails(self, tmp_path):
        root = tmp_path / "content"
        write_content_dir(root, SMALL_CATALOG, skip_paths={"/lessons/a"})
        with pytest.raises(MissingLessonError):
            check_content(ContentLoader(root))


class TestBuildSite:
    """Test the static export."""

    def test_writes_every_page(self, loader, tmp_path):
        output_dir = tmp_path / "site"
        report = build_site(loader, output_dir)

        assert (output_dir / "index.html").is_file()
        assert (output_dir / "404.html").is_file()
        for path in ["a", "b", "nested/c"]:
            assert (output_dir / "lessons" / path / "index.html").is_file()
        assert len(report.pages) == 5

    def test_lesson_page_content(self, loader, tmp_path):
        output_dir = tmp_path / "site"
        build_site(loader, output_dir, base_url="/docs/")

        page = (output_dir / "lessons" / "b" / "index.html").read_text(encoding="utf-8")
        assert "<title>B - Test</title>" in page
        assert '<meta name="description" content="About B">' in page
        assert 'class="nav-link active" href="/docs/lessons/b/"' in page
        assert page.count('class="nav-link active"') == 1
        assert "Hello ${user.name} &lt;admin&gt;" in page

    def test_not_found_page_has_no_active_link(self, loader, tmp_path):
        output_dir = tmp_path / "site"
        build_site(loader, output_dir)
        page = (output_dir / "404.html").read_text(encoding="utf-8")
        assert "Page not found" in page
        assert 'class="nav-link active"' not in page

    def test_catalog_export(self, loader, tmp_path):
        output_dir = tmp_path / "site"
        build_site(loader, output_dir)
        with open(output_dir / "catalog.json", encoding="utf-8") as f:
            assert json.load(f) == SMALL_CATALOG

    def test_clean_removes_stale_files(self, loader, tmp_path):
        output_dir = tmp_path / "site"
        output_dir.mkdir()
        stale = output_dir / "stale.html"
        stale.write_text("old", encoding="utf-8")

        build_site(loader, output_dir)
        assert stale.exists()

        build_site(loader, output_dir, clean=True)
        assert not stale.exists()

    def test_clean_refuses_source_directories(self, loader, content_dir, tmp_path, monkeypatch):
        for target in [content_dir, tmp_path]:
            with pytest.raises(ValueError, match="Refusing to clean"):
                build_site(loader, target, clean=True)

        work_dir = tmp_path / "work"
        work_dir.mkdir()
        monkeypatch.chdir(work_dir)
        with pytest.raises(ValueError, match="Refusing to clean"):
            build_site(loader, Path("."), clean=True)

        assert (content_dir / "catalog.yaml").is_file()
        assert loader.get_lesson_count() == 3

    def test_check_clean_target_allows_separate_output(self, content_dir, tmp_path):
        check_clean_target(tmp_path / "site", content_dir)
        check_clean_target(content_dir / "build", content_dir)


class TestCommandLine:
    """Test scripts/build_site.py."""

    def test_check_only(self, content_dir, tmp_path):
        output_dir = tmp_path / "site"
        assert main(["--content", str(content_dir), "--output", str(output_dir), "--check"]) == 0
        assert not output_dir.exists()

    def test_build(self, content_dir, tmp_path):
        output_dir = tmp_path / "site"
        assert main(["--content", str(content_dir), "--output", str(output_dir), "--clean"]) == 0
        assert (output_dir / "lessons" / "nested" / "c" / "index.html").is_file()

    def test_missing_content_dir(self, tmp_path):
        assert main(["--content", str(tmp_path / "nowhere"), "--check"]) == 1

    def test_invalid_catalog(self, content_dir):
        (content_dir / "catalog.yaml").write_text("title: Broken\nphases: []\nextra: [", encoding="utf-8")
        assert main(["--content", str(content_dir), "--check"]) == 1

    def test_duplicate_paths(self, tmp_path):
        document = json.loads(json.dumps(SMALL_CATALOG))
        document["phases"][1]["lessons"].append({"id": "dup", "title": "Dup", "path": "/lessons/a"})
        root = tmp_path / "content"
        write_content_dir(root, document)
        assert main(["--content", str(root), "--check"]) == 1

    def test_trailing_slash_path_fails_check(self, tmp_path):
        document = json.loads(json.dumps(SMALL_CATALOG))
        document["phases"][0]["lessons"][0]["path"] = "/lessons/a/"
        root = tmp_path / "content"
        write_content_dir(root, document)
        assert main(["--content", str(root), "--check"]) == 1

    def test_clean_refuses_content_dir(self, content_dir):
        assert main(["--content", str(content_dir), "--output", str(content_dir), "--clean"]) == 1
        assert (content_dir / "catalog.yaml").is_file()

    def test_shipped_content_checks(self):
        assert main(["--check"]) == 0
