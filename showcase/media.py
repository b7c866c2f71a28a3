"""Classify project directory files into cover, gallery images, and videos."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Union

from .models import MediaBundle, VideoAsset

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif"}
VIDEO_EXTENSIONS = {".mp4", ".webm", ".mov"}

# Lower rank wins when several designated covers are present.
COVER_NAMES = ("cover", "thumbnail", "preview")

VIDEO_MIME_OVERRIDES = {".mov": "video/quicktime"}


@dataclass(frozen=True, slots=True)
class CoverCandidate:
    """Image explicitly named as the project cover."""

    file: str
    rank: int


@dataclass(frozen=True, slots=True)
class GalleryImage:
    file: str


@dataclass(frozen=True, slots=True)
class Video:
    file: str
    loop: bool


MediaKind = Union[CoverCandidate, GalleryImage, Video]


def classify_file(name: str) -> MediaKind | None:
    """Return the media role implied by a filename, or ``None`` when unsupported."""
    path = PurePath(name)
    suffix = path.suffix.lower()
    stem = path.stem.lower()
    if suffix in IMAGE_EXTENSIONS:
        if stem in COVER_NAMES:
            return CoverCandidate(file=name, rank=COVER_NAMES.index(stem))
        return GalleryImage(file=name)
    if suffix in VIDEO_EXTENSIONS:
        return Video(file=name, loop=is_loop_video(stem))
    return None


def is_loop_video(stem: str) -> bool:
    """Loop videos play like animated images: muted, autoplaying, repeating."""
    text = stem.lower()
    return "_loop" in text or text.startswith("loop")


def sort_filenames(names: Iterable[str]) -> list[str]:
    """Order filenames deterministically regardless of filesystem enumeration."""
    return sorted(names, key=lambda name: (name.casefold(), name))


def classify_media(names: Iterable[str], *, sort: bool = True) -> MediaBundle:
    """Bucket filenames into a media bundle.

    When no file is named as a cover, the first gallery image is promoted and
    removed from the gallery list.
    """
    ordered = sort_filenames(names) if sort else list(names)

    cover: CoverCandidate | None = None
    images: list[str] = []
    videos: list[VideoAsset] = []
    for name in ordered:
        kind = classify_file(name)
        if isinstance(kind, CoverCandidate):
            if cover is None or kind.rank < cover.rank:
                cover = kind
        elif isinstance(kind, GalleryImage):
            images.append(kind.file)
        elif isinstance(kind, Video):
            videos.append(VideoAsset(file=kind.file, loop=kind.loop))

    cover_file = cover.file if cover else None
    if cover_file is None and images:
        cover_file = images.pop(0)
    return MediaBundle(cover=cover_file, images=images, videos=videos)


def video_mime_type(name: str) -> str:
    suffix = PurePath(name).suffix.lower()
    return VIDEO_MIME_OVERRIDES.get(suffix, f"video/{suffix.lstrip('.')}")
