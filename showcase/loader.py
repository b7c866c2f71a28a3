"""Discover project directories and load them into `ProjectRecord` instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .config import Config
from .frontmatter import parse_front_matter
from .media import classify_media
from .models import ProjectRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadResult:
    """Loaded projects plus non-fatal diagnostics gathered along the way."""

    projects: list[ProjectRecord] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    def report(self, message: str) -> None:
        logger.info(message)
        self.diagnostics.append(message)


def load_projects(config: Config, *, create_missing: bool = True) -> LoadResult:
    """Load every project directory under the configured root, sorted for display.

    A missing root is created unless ``create_missing`` is false (dry runs).
    """
    root = config.projects_dir
    result = LoadResult()

    if not root.exists():
        if not create_missing:
            result.report(f"No projects directory found at {root}")
            return result
        root.mkdir(parents=True, exist_ok=True)
        result.report(f"No projects directory found; created {root}")
        return result

    for directory in _iter_project_dirs(root):
        metadata_path = directory / config.metadata_filename
        if not metadata_path.is_file():
            result.report(f"Skipping {directory.name}: no {config.metadata_filename} found")
            continue
        result.projects.append(load_project(directory, metadata_path))

    result.projects = sort_projects(result.projects)
    return result


def load_project(directory: Path, metadata_path: Path) -> ProjectRecord:
    """Assemble a single project record from its directory."""
    # utf-8-sig drops a byte order mark that would hide the opening delimiter.
    parsed = parse_front_matter(metadata_path.read_text(encoding="utf-8-sig"))
    if not parsed.has_front_matter:
        logger.warning(
            "%s has no closing front matter delimiter; treating the whole file as body.",
            metadata_path,
        )

    filenames = [path.name for path in directory.iterdir() if path.is_file()]
    return ProjectRecord(
        slug=directory.name,
        metadata=parsed.metadata,
        body=parsed.body,
        media=classify_media(filenames),
    )


def sort_projects(projects: Iterable[ProjectRecord]) -> list[ProjectRecord]:
    """Order by numeric `order`, then case-insensitive title; equal keys keep input order."""
    return sorted(projects, key=_sort_key)


def _sort_key(project: ProjectRecord) -> tuple[int, str]:
    return (project.order, project.title.casefold())


def _iter_project_dirs(root: Path) -> Iterator[Path]:
    for path in sorted(root.iterdir(), key=lambda item: item.name):
        if path.is_dir() and not path.name.startswith("."):
            yield path
