from __future__ import annotations

from pathlib import Path

from showcase.config import Config
from showcase.pipeline import BuildStatus, build_showcase

HOST = (
    "<html><body>\n"
    "  <section>\n"
    "    <!-- DYNAMIC-PROJECTS-START -->\n"
    "    <!-- DYNAMIC-PROJECTS-END -->\n"
    "  </section>\n"
    "  <!-- PROJECT-MODALS-START -->\n"
    "  <!-- PROJECT-MODALS-END -->\n"
    "</body></html>\n"
)


def _site(tmp_path: Path, host: str | None = HOST) -> Config:
    projects = tmp_path / "projects"
    alpha = projects / "Alpha"
    alpha.mkdir(parents=True)
    (alpha / "project.md").write_text(
        "---\ntitle: Alpha\norder: 2\n---\nAlpha **body**",
        encoding="utf-8",
    )
    (alpha / "cover.png").write_bytes(b"")
    beta = projects / "Beta"
    beta.mkdir()
    (beta / "project.md").write_text("---\ntitle: Beta\norder: 1\n---\n", encoding="utf-8")

    index = tmp_path / "index.html"
    if host is not None:
        index.write_text(host, encoding="utf-8")
    return Config(projects_dir=projects, index_file=index)


def test_build_injects_sorted_cards_and_modals(tmp_path: Path) -> None:
    config = _site(tmp_path)

    result = build_showcase(config)

    assert result.status is BuildStatus.UPDATED
    assert not result.status.failed
    assert result.modals_patched
    assert [project.title for project in result.projects] == ["Beta", "Alpha"]

    html = config.index_file.read_text(encoding="utf-8")
    assert html.index('data-project="Beta"') < html.index('data-project="Alpha"')
    assert html.index('id="modal-Beta"') < html.index('id="modal-Alpha"')
    assert "<p>Alpha <strong>body</strong></p>" in html
    assert 'src="projects/Alpha/cover.png"' in html
    assert html.startswith("<html><body>\n  <section>\n    <!-- DYNAMIC-PROJECTS-START -->\n")
    assert html.endswith("  <!-- PROJECT-MODALS-END -->\n</body></html>\n")


def test_rebuild_is_stable(tmp_path: Path) -> None:
    config = _site(tmp_path)

    build_showcase(config)
    first = config.index_file.read_text(encoding="utf-8")
    build_showcase(config)

    assert config.index_file.read_text(encoding="utf-8") == first


def test_dry_run_leaves_document_untouched(tmp_path: Path) -> None:
    config = _site(tmp_path)

    result = build_showcase(config, dry_run=True)

    assert result.status is BuildStatus.DRY_RUN
    assert config.index_file.read_text(encoding="utf-8") == HOST


def test_missing_document(tmp_path: Path) -> None:
    config = _site(tmp_path, host=None)

    result = build_showcase(config)

    assert result.status is BuildStatus.MISSING_DOCUMENT
    assert result.status.failed
    assert result.error is not None and "Host document not found" in result.error
    assert not config.index_file.exists()


def test_missing_markers_leave_document_unchanged(tmp_path: Path) -> None:
    host = "<html><body><p>No markers</p></body></html>\n"
    config = _site(tmp_path, host=host)

    result = build_showcase(config)

    assert result.status is BuildStatus.MISSING_MARKERS
    assert result.status.failed
    assert "DYNAMIC-PROJECTS-START" in (result.error or "")
    assert config.index_file.read_text(encoding="utf-8") == host


def test_modal_region_is_optional(tmp_path: Path) -> None:
    host = "<div><!-- DYNAMIC-PROJECTS-START --><!-- DYNAMIC-PROJECTS-END --></div>\n"
    config = _site(tmp_path, host=host)

    result = build_showcase(config)

    assert result.status is BuildStatus.UPDATED
    assert not result.modals_patched
    html = config.index_file.read_text(encoding="utf-8")
    assert 'data-project="Alpha"' in html
    assert "project-modal" not in html


def test_dangling_modal_marker_still_updates_cards(tmp_path: Path) -> None:
    host = (
        "<div><!-- DYNAMIC-PROJECTS-START --><!-- DYNAMIC-PROJECTS-END --></div>\n"
        "<!-- PROJECT-MODALS-START -->\n"
        "</body>\n"
    )
    config = _site(tmp_path, host=host)

    result = build_showcase(config)

    assert result.status is BuildStatus.UPDATED
    assert not result.status.failed
    assert not result.modals_patched
    html = config.index_file.read_text(encoding="utf-8")
    assert 'data-project="Alpha"' in html
    assert 'id="modal-Alpha"' not in html
    assert html.endswith("<!-- PROJECT-MODALS-START -->\n</body>\n")


def test_dry_run_does_not_create_projects_root(tmp_path: Path) -> None:
    index = tmp_path / "index.html"
    index.write_text(HOST, encoding="utf-8")
    config = Config(projects_dir=tmp_path / "projects", index_file=index)

    result = build_showcase(config, dry_run=True)

    assert result.status is BuildStatus.NO_PROJECTS
    assert result.diagnostics == [f"No projects directory found at {tmp_path / 'projects'}"]
    assert not (tmp_path / "projects").exists()


def test_no_projects_does_not_touch_document(tmp_path: Path) -> None:
    index = tmp_path / "index.html"
    index.write_text(HOST, encoding="utf-8")
    config = Config(projects_dir=tmp_path / "projects", index_file=index)

    result = build_showcase(config)

    assert result.status is BuildStatus.NO_PROJECTS
    assert not result.status.failed
    assert result.projects == []
    assert (tmp_path / "projects").is_dir()
    assert index.read_text(encoding="utf-8") == HOST
