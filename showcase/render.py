"""Render project cards and modals with Jinja2."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from markupsafe import Markup

from .markdown import render_markdown
from .media import video_mime_type
from .models import ProjectRecord

logger = logging.getLogger(__name__)

BUILTIN_TEMPLATES = Path(__file__).resolve().parent / "templates"
CARD_TEMPLATE = "card.html"
MODAL_TEMPLATE = "modal.html"
SAFE_SCHEMES = {"", "http", "https", "mailto"}


class TemplateLoadError(RuntimeError):
    """Raised when card or modal templates cannot be loaded."""


class ProjectRenderer:
    """Render project records into card and modal HTML fragments.

    Templates in ``templates_dir`` take precedence over the built-in ones,
    so a site can restyle either fragment without replacing both.
    """

    def __init__(self, templates_dir: Path | None = None, *, asset_url_prefix: str = "projects") -> None:
        self.asset_url_prefix = asset_url_prefix.strip("/")
        search_paths = [BUILTIN_TEMPLATES]
        if templates_dir is not None:
            if templates_dir.is_dir():
                search_paths.insert(0, templates_dir)
            else:
                logger.warning("Templates directory %s not found; using built-in templates.", templates_dir)

        environment = Environment(
            loader=FileSystemLoader([str(path) for path in search_paths]),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        environment.filters["safe_href"] = safe_href
        environment.filters["comment_safe"] = comment_safe
        environment.filters["video_mime"] = video_mime_type
        self._environment = environment
        try:
            self._card = environment.get_template(CARD_TEMPLATE)
            self._modal = environment.get_template(MODAL_TEMPLATE)
        except TemplateNotFound as exc:
            raise TemplateLoadError(f"Required template '{exc.name}' not found.") from exc

    def asset_base(self, project: ProjectRecord) -> str:
        if not self.asset_url_prefix:
            return project.slug
        return f"{self.asset_url_prefix}/{project.slug}"

    def render_card(self, project: ProjectRecord) -> str:
        return self._card.render(project=project, asset_base=self.asset_base(project))

    def render_modal(self, project: ProjectRecord) -> str:
        # Body HTML comes from the markdown renderer, which escapes its text.
        body_html = Markup(render_markdown(project.body))
        return self._modal.render(
            project=project,
            gallery=project.gallery(self.asset_url_prefix),
            body_html=body_html,
            asset_base=self.asset_base(project),
        )

    def render_cards(self, projects: Iterable[ProjectRecord]) -> str:
        return "\n".join(self.render_card(project) for project in projects)

    def render_modals(self, projects: Iterable[ProjectRecord]) -> str:
        return "\n".join(self.render_modal(project) for project in projects)


@lru_cache(maxsize=1)
def default_renderer() -> ProjectRenderer:
    return ProjectRenderer()


def render_card(project: ProjectRecord) -> str:
    """Render a project card with the built-in template."""
    return default_renderer().render_card(project)


def render_modal(project: ProjectRecord) -> str:
    """Render a project modal with the built-in template."""
    return default_renderer().render_modal(project)


def safe_href(value: str) -> str:
    """Drop link targets with scripting schemes such as ``javascript:``."""
    text = value.strip()
    try:
        scheme = urlsplit(text).scheme.lower()
    except ValueError:
        return "#"
    if scheme not in SAFE_SCHEMES:
        logger.warning("Refusing link with unsupported scheme: %s", text)
        return "#"
    return text


def comment_safe(value: str) -> str:
    """Keep text from terminating the surrounding HTML comment."""
    text = value
    while "--" in text:
        text = text.replace("--", "- -")
    return text
