"""Typed representations of discovered projects."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CATEGORY = "Project"
# Projects without a usable `order` sort after every explicitly ordered one.
UNORDERED_SENTINEL = 999
# Leading integer, so "2", "+2" and "2nd" all order as 2.
ORDER_RE = re.compile(r"[+-]?\d+")


class VideoAsset(BaseModel):
    """Video file inside a project directory."""

    model_config = ConfigDict(frozen=True)

    file: str
    loop: bool = Field(default=False, description="Autoplay muted on repeat without controls.")


class MediaBundle(BaseModel):
    """Classified media files for a project, in gallery order."""

    model_config = ConfigDict(frozen=True)

    cover: Optional[str] = Field(default=None)
    images: list[str] = Field(default_factory=list)
    videos: list[VideoAsset] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.cover is None and not self.images and not self.videos


class GalleryKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class GalleryItem(BaseModel):
    """Single entry of the flattened modal gallery."""

    model_config = ConfigDict(frozen=True)

    kind: GalleryKind
    src: str
    loop: bool = False

    @property
    def is_video(self) -> bool:
        return self.kind is GalleryKind.VIDEO


class ProjectRecord(BaseModel):
    """Full representation of a project directory."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(description="Directory name; DOM id and asset path segment.")
    metadata: dict[str, str] = Field(default_factory=dict, description="Front-matter fields.")
    body: str = Field(default="", description="Raw markdown body.")
    media: MediaBundle = Field(default_factory=MediaBundle)

    @field_validator("slug")
    def _require_slug(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("slug cannot be empty")
        return value

    def meta_value(self, key: str) -> Optional[str]:
        value = self.metadata.get(key, "").strip()
        return value or None

    @property
    def title(self) -> str:
        return self.meta_value("title") or self.slug

    @property
    def category(self) -> str:
        return self.meta_value("category") or DEFAULT_CATEGORY

    @property
    def description(self) -> str:
        return self.meta_value("description") or ""

    @property
    def github(self) -> Optional[str]:
        return self.meta_value("github")

    @property
    def live(self) -> Optional[str]:
        return self.meta_value("live")

    @property
    def tech(self) -> list[str]:
        raw = self.meta_value("tech")
        if raw is None:
            return []
        return [entry.strip() for entry in raw.split(",") if entry.strip()]

    @property
    def order(self) -> int:
        raw = self.meta_value("order")
        match = ORDER_RE.match(raw) if raw is not None else None
        if match is None:
            return UNORDERED_SENTINEL
        return int(match.group(0))

    def gallery(self, prefix: str = "projects") -> list[GalleryItem]:
        """Flatten cover, images, and videos into the modal gallery sequence."""
        base = f"{prefix}/{self.slug}" if prefix else self.slug
        items: list[GalleryItem] = []
        if self.media.cover:
            items.append(GalleryItem(kind=GalleryKind.IMAGE, src=f"{base}/{self.media.cover}"))
        for image in self.media.images:
            items.append(GalleryItem(kind=GalleryKind.IMAGE, src=f"{base}/{image}"))
        for video in self.media.videos:
            items.append(
                GalleryItem(kind=GalleryKind.VIDEO, src=f"{base}/{video.file}", loop=video.loop)
            )
        return items
