"""CLI entrypoints for the showcase builder."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .assets import render_script, render_styles, write_static_assets
from .config import Config, MarkerConfig, load_config
from .pipeline import BuildResult, BuildStatus, build_showcase
from .render import TemplateLoadError
from .scaffold import ScaffoldError, ScaffoldResult, normalize_slug, scaffold_project

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="Render project folders into cards and modals inside a host page.")

ConfigPathOption = Annotated[
    str,
    typer.Option(
        "--config",
        "-c",
        help="Path to showcase.yml, or a directory containing it (defaults apply when absent).",
    ),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging."),
]


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context, verbose: VerboseFlag = False) -> None:
    """Build the showcase when no command is given."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@app.command()
def build(
    config_path: ConfigPathOption = ".",
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Render and patch in memory without writing the host page."),
    ] = False,
    print_assets: Annotated[
        bool,
        typer.Option(
            "--print-assets/--no-print-assets",
            help="Print the CSS and JS blocks the generated markup depends on.",
        ),
    ] = True,
) -> None:
    """Scan project folders and inject cards and modals into the host page."""
    config = _load(config_path)
    console.print(f"[bold blue]Building[/]: scanning {_display_path(config.projects_dir)}")

    try:
        result = build_showcase(config, dry_run=dry_run)
    except TemplateLoadError as exc:
        console.print(f"[bold red]Template error[/]: {exc}")
        raise typer.Exit(code=1) from exc

    _print_diagnostics(result)

    if result.status is BuildStatus.NO_PROJECTS:
        _print_getting_started(config)
        raise typer.Exit()

    console.print(f"[bold green]Projects[/]: found {len(result.projects)} project(s)")
    for project in result.projects:
        console.print(f"  - {project.title}", markup=False, highlight=False)

    if result.status.failed:
        console.print(f"[bold red]Not updated[/]: {escape(result.error or '')}")
        if result.status is BuildStatus.MISSING_MARKERS:
            _print_marker_help(config.markers)
        raise typer.Exit(code=1)

    _print_write_summary(config, result)

    if print_assets:
        _print_static_assets()


@app.command()
def assets(
    config_path: ConfigPathOption = ".",
    output_dir: Annotated[
        str | None,
        typer.Option("--output-dir", "-o", help="Write showcase.css and showcase.js into this directory."),
    ] = None,
) -> None:
    """Print or write the static CSS and JS used by cards and modals."""
    config = _load(config_path)
    target = Path(output_dir) if output_dir else config.assets_dir
    if target is None:
        _print_static_assets()
        return

    for path in write_static_assets(target):
        console.print(f"[bold green]Wrote[/]: {_display_path(path)}")


@app.command()
def new(
    slug: Annotated[
        str,
        typer.Argument(..., help="Directory name for the project; also used as its DOM id."),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Override the default title derived from the slug."),
    ] = None,
    config_path: ConfigPathOption = ".",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing metadata file."),
    ] = False,
) -> None:
    """Create a project folder with a starter metadata file."""
    try:
        normalized_slug = normalize_slug(slug)
    except ScaffoldError as exc:
        console.print(f"[bold red]Cannot scaffold[/]: {exc}")
        raise typer.Exit(code=1) from exc

    config = _load(config_path)
    try:
        result = scaffold_project(config, normalized_slug, title, force=force)
    except ScaffoldError as exc:
        console.print(f"[bold red]Cannot scaffold[/]: {exc}")
        raise typer.Exit(code=1) from exc

    if normalized_slug != slug:
        console.print(f"[bold yellow]Note[/]: slug normalized to '{normalized_slug}'.")
    _print_scaffold_summary(normalized_slug, result)


def _print_diagnostics(result: BuildResult) -> None:
    for message in result.diagnostics:
        console.print(f"[bold yellow]Warning[/]: {escape(message)}")


def _print_getting_started(config: Config) -> None:
    root = _display_path(config.projects_dir)
    console.print(f"[bold yellow]No projects found[/] in {root}.")
    console.print(
        f"Create a subdirectory with a {config.metadata_filename} file to get started, "
        "or run 'showcase new <slug>'."
    )
    console.print("\nExample structure:")
    for line in (
        f"  {config.projects_dir.name}/",
        "    My_Project/",
        f"      {config.metadata_filename}",
        "      cover.jpg",
    ):
        console.print(line, markup=False, highlight=False)


def _print_marker_help(markers: MarkerConfig) -> None:
    console.print(
        f"Add {markers.projects_start} and {markers.projects_end} around your project cards.",
        markup=False,
    )
    console.print(
        f"Add {markers.modals_start} and {markers.modals_end} before </body> for modals.",
        markup=False,
    )


def _print_write_summary(config: Config, result: BuildResult) -> None:
    location = _display_path(result.output_path)
    if result.status is BuildStatus.DRY_RUN:
        console.print(f"[bold blue]Dry run[/]: {location} left unchanged.")
    else:
        console.print(f"[bold green]Updated[/]: {location}")
    if not result.modals_patched:
        console.print(
            "[bold yellow]Modals skipped[/]: modal markers not found; "
            f"add {config.markers.modals_start} to enable project modals.",
            highlight=False,
        )


def _print_static_assets() -> None:
    rule = "=" * 60
    console.out(rule)
    console.out("Make sure the following CSS and JS are included in your page:")
    console.out(rule)
    console.out("\nCSS (add to your <style> tag or external stylesheet):")
    console.out(render_styles(), highlight=False)
    console.out("\nJS (add to your <script> tag or external script):")
    console.out(render_script(), highlight=False)


def _print_scaffold_summary(slug: str, result: ScaffoldResult) -> None:
    console.print(f"[bold green]Scaffold ready[/]: project '{slug}'")
    for path in result.created:
        console.print(f"- {_display_path(path)} (new)")
    for path in result.updated:
        console.print(f"- {_display_path(path)} (updated)")
    if result.notes:
        console.print("[bold blue]Next steps[/]:")
        for note in result.notes:
            console.print(f"- {note}")


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )
