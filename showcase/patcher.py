"""Splice generated fragments into marker-delimited regions of the host page."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .config import MarkerConfig

logger = logging.getLogger(__name__)


class PatchError(ValueError):
    """Raised when the host document cannot be patched."""


class MarkerNotFoundError(PatchError):
    """Raised when an injection marker is missing from the host document."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Cannot locate injection point: marker {marker!r} not found.")
        self.marker = marker


@dataclass(frozen=True, slots=True)
class PatchResult:
    text: str
    modals_patched: bool


def replace_region(text: str, start: str, end: str, content: str) -> str:
    """Replace everything strictly between ``start`` and the following ``end``.

    The end marker keeps the indentation of the line it sits on; text outside
    the markers is returned unchanged.
    """
    start_index = text.find(start)
    if start_index == -1:
        raise MarkerNotFoundError(start)
    inner_start = start_index + len(start)
    end_index = text.find(end, inner_start)
    if end_index == -1:
        raise MarkerNotFoundError(end)

    return f"{text[:inner_start]}\n{content}\n{_line_indent(text, end_index)}{text[end_index:]}"


def patch_document(
    text: str,
    cards_html: str,
    modals_html: str,
    markers: MarkerConfig,
) -> PatchResult:
    """Patch the required projects region and, when intact, the modal region.

    A broken modal region never discards the cards patch.
    """
    patched = replace_region(text, markers.projects_start, markers.projects_end, cards_html)

    if markers.modals_start not in patched:
        logger.info("Modal marker %s not present; skipping modal region.", markers.modals_start)
        return PatchResult(text=patched, modals_patched=False)

    try:
        with_modals = replace_region(patched, markers.modals_start, markers.modals_end, modals_html)
    except MarkerNotFoundError as exc:
        logger.warning("Skipping modal region: %s", exc)
        return PatchResult(text=patched, modals_patched=False)
    return PatchResult(text=with_modals, modals_patched=True)


def read_document(path: Path) -> str:
    """Read the host document without translating line endings."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_document(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` via a temporary file and an atomic rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else None
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        if mode is not None:
            os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


def _line_indent(text: str, index: int) -> str:
    line_start = text.rfind("\n", 0, index) + 1
    prefix = text[line_start:index]
    return prefix if prefix.isspace() else ""
