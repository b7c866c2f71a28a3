"""Split project metadata files into front-matter fields and a markdown body."""

from __future__ import annotations

from dataclasses import dataclass, field

DELIMITER = "---"


@dataclass(frozen=True, slots=True)
class FrontMatter:
    """Result of splitting a metadata file."""

    metadata: dict[str, str] = field(default_factory=dict)
    body: str = ""
    has_front_matter: bool = False


def parse_front_matter(text: str) -> FrontMatter:
    """Parse ``key: value`` lines between the first two ``---`` lines.

    Keys are lower-cased and values trimmed; lines without a colon are
    ignored. When the closing delimiter is missing the whole text becomes the
    body and the metadata is empty.
    """
    lines = text.splitlines()
    opening = _find_delimiter(lines, 0)
    closing = _find_delimiter(lines, opening + 1) if opening is not None else None
    if opening is None or closing is None:
        return FrontMatter(body=text.strip())

    metadata = parse_fields(lines[opening + 1 : closing])
    body = "\n".join(lines[closing + 1 :]).strip()
    return FrontMatter(metadata=metadata, body=body, has_front_matter=True)


def parse_fields(lines: list[str]) -> dict[str, str]:
    """Split each line at its first colon into a lower-cased key and a value."""
    metadata: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if ":" not in line:
            continue
        key, _, value = line.partition(":")
        metadata[key.strip().lower()] = value.strip()
    return metadata


def _find_delimiter(lines: list[str], start: int) -> int | None:
    for idx in range(start, len(lines)):
        if lines[idx].strip() == DELIMITER:
            return idx
    return None
