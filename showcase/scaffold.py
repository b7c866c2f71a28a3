"""Utilities for scaffolding new project directories."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .config import Config

SLUG_PATTERN = re.compile(r"[^A-Za-z0-9_\-]+")
WHITESPACE_PATTERN = re.compile(r"\s+")


class ScaffoldError(RuntimeError):
    """Raised when scaffolding cannot continue."""


@dataclass(slots=True)
class ScaffoldResult:
    """Details about filesystem writes performed during scaffolding."""

    project_dir: Path
    created: list[Path] = field(default_factory=list)
    updated: list[Path] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    def record(self, path: Path, existed: bool) -> None:
        if existed:
            self.updated.append(path)
        else:
            self.created.append(path)


def normalize_slug(raw: str) -> str:
    """Convert user input into a directory name usable as a DOM id and URL segment."""
    text = WHITESPACE_PATTERN.sub("_", raw.strip())
    text = SLUG_PATTERN.sub("", text).strip("_-")
    if not text:
        raise ScaffoldError("Unable to derive a valid slug. Provide letters, numbers, hyphens, or underscores.")
    return text


def default_title(slug: str) -> str:
    """Generate a human-friendly title from a slug."""
    text = WHITESPACE_PATTERN.sub(" ", slug.replace("_", " ").replace("-", " ")).strip()
    words = [word.capitalize() if not word.isupper() else word for word in text.split()]
    return " ".join(words) or "Untitled"


def scaffold_project(
    config: Config,
    slug: str,
    title: str | None = None,
    *,
    force: bool = False,
) -> ScaffoldResult:
    """Create ``<projects_dir>/<slug>/`` with a starter metadata file."""
    slug = normalize_slug(slug)
    title = title.strip() if title else ""
    if not title:
        title = default_title(slug)

    project_dir = config.projects_dir / slug
    project_dir.mkdir(parents=True, exist_ok=True)
    metadata_path = project_dir / config.metadata_filename

    existed = metadata_path.exists()
    if existed and not force:
        raise ScaffoldError(f"Path already exists: {metadata_path}")
    metadata_path.write_text(render_metadata_template(title), encoding="utf-8")

    result = ScaffoldResult(project_dir=project_dir)
    result.record(metadata_path, existed)
    result.notes.append(
        "Add cover.jpg (or thumbnail/preview) plus gallery images and videos to "
        f"{project_dir.as_posix()}; name a video *_loop.mp4 to autoplay it on repeat."
    )
    return result


def render_metadata_template(title: str) -> str:
    return (
        f"---\n"
        f"title: {title}\n"
        f"category: Project\n"
        f"description: One-sentence summary shown on the card.\n"
        f"tech: Python, HTML\n"
        f"github: \n"
        f"live: \n"
        f"order: \n"
        f"---\n"
        f"\n"
        f"## Overview\n"
        f"\n"
        f"Longer description shown in the project modal. Supports **bold**, *italic*,\n"
        f"[links](https://example.com), headings, and bullet lists.\n"
        f"\n"
        f"- First highlight\n"
        f"- Second highlight\n"
    )
