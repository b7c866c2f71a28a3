"""Render project folders into cards and modals injected into a static page."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version

from .config import Config, MarkerConfig, load_config
from .loader import load_projects
from .pipeline import BuildResult, BuildStatus, build_showcase
from .render import render_card, render_modal

__all__ = [
    "__version__",
    "BuildResult",
    "BuildStatus",
    "Config",
    "MarkerConfig",
    "build_showcase",
    "load_config",
    "load_projects",
    "render_card",
    "render_modal",
]

try:
    __version__ = load_pkg_version("showcase-builder")
except PackageNotFoundError:
    # Running from a source checkout without an install.
    __version__ = "0.0.0"
