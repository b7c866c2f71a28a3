from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

CONFIG_FILENAME = "showcase.yml"


class MarkerConfig(BaseModel):
    """Comment markers bounding the generated regions of the host document."""

    projects_start: str = Field(default="<!-- DYNAMIC-PROJECTS-START -->")
    projects_end: str = Field(default="<!-- DYNAMIC-PROJECTS-END -->")
    modals_start: str = Field(default="<!-- PROJECT-MODALS-START -->")
    modals_end: str = Field(default="<!-- PROJECT-MODALS-END -->")

    @field_validator("projects_start", "projects_end", "modals_start", "modals_end")
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Markers cannot be empty.")
        return value

    @model_validator(mode="after")
    def _require_distinct(self) -> "MarkerConfig":
        markers = [self.projects_start, self.projects_end, self.modals_start, self.modals_end]
        if len(set(markers)) != len(markers):
            raise ValueError("Projects and modal markers must all be distinct.")
        return self


class Config(BaseModel):
    projects_dir: Path = Field(default=Path("projects"))
    index_file: Path = Field(default=Path("index.html"))
    metadata_filename: str = Field(
        default="project.md",
        description="Metadata file required inside every project directory.",
    )
    asset_url_prefix: str = Field(
        default="projects",
        description="URL path prefix under which project media is served.",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Optional directory whose card.html/modal.html override the built-in templates.",
    )
    assets_dir: Path | None = Field(
        default=None,
        description="Optional directory where the static CSS/JS blocks are written.",
    )
    markers: MarkerConfig = Field(default_factory=MarkerConfig)

    @field_validator("projects_dir", "index_file", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("templates_dir", "assets_dir", mode="before")
    def _ensure_optional_path(cls, value: Any) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value)

    @field_validator("metadata_filename")
    def _plain_filename(cls, value: str) -> str:
        text = value.strip()
        if not text or "/" in text or "\\" in text:
            raise ValueError("metadata_filename must be a plain file name.")
        return text

    @field_validator("asset_url_prefix")
    def _normalize_prefix(cls, value: str) -> str:
        return value.strip().strip("/")


def load_config(path: str | Path) -> Config:
    """Read ``showcase.yml`` from a file path or a site directory.

    Relative ``projects_dir``, ``index_file``, ``templates_dir`` and
    ``assets_dir`` values are anchored at the site directory, so a build gives
    the same result from any working directory.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    base_dir: Path
    if candidate.is_dir():
        # A directory without a config file builds with defaults.
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            data = _read_yaml(config_file)
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        data = _read_yaml(candidate)
        base_dir = candidate.parent.resolve()

    cfg = Config(**data)

    def _abs_required(value: Path) -> Path:
        return value if value.is_absolute() else (base_dir / value).resolve()

    def _abs_optional(value: Path | None) -> Path | None:
        if value is None:
            return None
        return _abs_required(value)

    cfg.projects_dir = _abs_required(cfg.projects_dir)
    cfg.index_file = _abs_required(cfg.index_file)
    cfg.templates_dir = _abs_optional(cfg.templates_dir)
    cfg.assets_dir = _abs_optional(cfg.assets_dir)
    return cfg


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration {path} must define a mapping.")
    return data
