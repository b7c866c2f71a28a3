from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from showcase.config import CONFIG_FILENAME, Config, MarkerConfig, load_config


def _write_site_config(root: Path) -> Path:
    config_text = (
        "projects_dir: work\n"
        "index_file: public/index.html\n"
        "metadata_filename: README.md\n"
        "asset_url_prefix: /media/work/\n"
        "templates_dir: theme\n"
        "markers:\n"
        "  projects_start: '<!-- CARDS -->'\n"
        "  projects_end: '<!-- /CARDS -->'\n"
    )
    config_path = root / CONFIG_FILENAME
    config_path.write_text(config_text, encoding="utf-8")
    return config_path


def test_relative_paths_resolve_against_config_directory(tmp_path: Path) -> None:
    site = tmp_path / "site"
    site.mkdir()
    config_path = _write_site_config(site)

    config = load_config(config_path)

    assert config.projects_dir == (site / "work").resolve()
    assert config.index_file == (site / "public" / "index.html").resolve()
    assert config.templates_dir == (site / "theme").resolve()
    assert config.assets_dir is None
    assert config.metadata_filename == "README.md"
    assert config.asset_url_prefix == "media/work"
    assert config.markers.projects_start == "<!-- CARDS -->"
    assert config.markers.modals_start == "<!-- PROJECT-MODALS-START -->"


def test_directory_argument_reads_contained_config(tmp_path: Path) -> None:
    _write_site_config(tmp_path)

    config = load_config(tmp_path)

    assert config.projects_dir == (tmp_path / "work").resolve()


def test_directory_without_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.projects_dir == (tmp_path / "projects").resolve()
    assert config.index_file == (tmp_path / "index.html").resolve()
    assert config.metadata_filename == "project.md"
    assert config.markers == MarkerConfig()


def test_absolute_paths_are_kept(tmp_path: Path) -> None:
    elsewhere = tmp_path / "elsewhere"
    (tmp_path / CONFIG_FILENAME).write_text(f"projects_dir: {elsewhere.as_posix()}\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.projects_dir == elsewhere


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / CONFIG_FILENAME
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_markers_must_be_distinct() -> None:
    with pytest.raises(ValidationError):
        MarkerConfig(projects_start="<!-- X -->", projects_end="<!-- X -->")


def test_markers_cannot_be_blank() -> None:
    with pytest.raises(ValidationError):
        MarkerConfig(modals_end="   ")


def test_metadata_filename_must_be_plain() -> None:
    with pytest.raises(ValidationError):
        Config(metadata_filename="nested/project.md")
