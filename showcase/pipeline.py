"""End-to-end build: load projects, render fragments, patch the host page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import Config
from .loader import load_projects
from .models import ProjectRecord
from .patcher import PatchError, patch_document, read_document, write_document
from .render import ProjectRenderer

logger = logging.getLogger(__name__)


class BuildStatus(str, Enum):
    """Outcome of a build run."""

    UPDATED = "updated"
    DRY_RUN = "dry-run"
    NO_PROJECTS = "no-projects"
    MISSING_DOCUMENT = "missing-document"
    MISSING_MARKERS = "missing-markers"

    @property
    def failed(self) -> bool:
        """Projects were found but the host document was left unmodified."""
        return self in {BuildStatus.MISSING_DOCUMENT, BuildStatus.MISSING_MARKERS}


@dataclass(slots=True)
class BuildResult:
    """Aggregate results from a build run."""

    status: BuildStatus
    output_path: Path
    projects: list[ProjectRecord] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)
    modals_patched: bool = False
    error: str | None = None


def build_showcase(
    config: Config,
    *,
    dry_run: bool = False,
    renderer: ProjectRenderer | None = None,
) -> BuildResult:
    """Run a full build against the configured projects root and host document."""
    loaded = load_projects(config, create_missing=not dry_run)
    result = BuildResult(
        status=BuildStatus.NO_PROJECTS,
        output_path=config.index_file,
        projects=loaded.projects,
        diagnostics=loaded.diagnostics,
    )
    if not loaded.projects:
        logger.info("No projects found under %s; nothing to write.", config.projects_dir)
        return result

    renderer = renderer or ProjectRenderer(
        config.templates_dir,
        asset_url_prefix=config.asset_url_prefix,
    )
    cards_html = renderer.render_cards(loaded.projects)
    modals_html = renderer.render_modals(loaded.projects)

    if not config.index_file.is_file():
        result.status = BuildStatus.MISSING_DOCUMENT
        result.error = f"Host document not found: {config.index_file}"
        logger.info(result.error)
        return result

    try:
        patched = patch_document(
            read_document(config.index_file),
            cards_html,
            modals_html,
            config.markers,
        )
    except PatchError as exc:
        result.status = BuildStatus.MISSING_MARKERS
        result.error = str(exc)
        logger.info("Unable to patch %s: %s", config.index_file, exc)
        return result

    result.modals_patched = patched.modals_patched
    if dry_run:
        result.status = BuildStatus.DRY_RUN
        return result

    write_document(config.index_file, patched.text)
    result.status = BuildStatus.UPDATED
    logger.debug("Wrote %d project(s) into %s", len(loaded.projects), config.index_file)
    return result
