#!/usr/bin/env python3
"""
Static Site Build CLI

Builds the portfolio site from the content store and inspects individual routes.

Commands:
    build   - Render every route and write the static site
    routes  - List every route the site serves
    show    - Render a single route to stdout
    list    - List the records of a content category
    events  - Show recent build events

Examples:\n

    build_site.py build                          # Build into OUTPUT_PATH

    build_site.py build --output dist --drafts   # Include unpublished posts in listings

    build_site.py show /blog/hello-world/        # Print one page

    build_site.py list ventures                  # Ventures in display order
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vitrine.contexts.content import ContentCategory, ContentLoader, ContentRepository
from vitrine.contexts.content.loader import CONTENT_PATH
from vitrine.contexts.presentation import Site, TemplateRenderError, load_site_config
from vitrine.contexts.presentation.logger import setup_rendering_logger
from vitrine.contexts.presentation.site import OUTPUT_PATH
from vitrine.contexts.presentation.site_config import SITE_CONFIG_PATH
from vitrine.utils.event_logging import LOGS_PATH, get_recent_events
from vitrine.utils.timestamp import format_timestamp, now

app = typer.Typer(
    help="Build the portfolio site and inspect its routes",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _make_site(content: Path, config: Path, drafts: bool = False, record_events: bool = False) -> Site:
    """Site over the given content store, exiting cleanly on a bad config file."""
    try:
        site_config = load_site_config(config)
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    loader = ContentLoader(content, record_events=record_events)
    return Site(
        repository=ContentRepository(loader=loader),
        config=site_config,
        include_unpublished=drafts,
    )


@app.command("build")
def build_command(
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Directory the site is written to"),
    ] = OUTPUT_PATH,
    content: Annotated[
        Path,
        typer.Option("--content", "-c", help="Root of the content store"),
    ] = CONTENT_PATH,
    config: Annotated[
        Path,
        typer.Option("--config", help="Site configuration file (optional)"),
    ] = SITE_CONFIG_PATH,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="List unpublished posts alongside published ones"),
    ] = False,
    logs: Annotated[
        Path,
        typer.Option("--logs", help="Directory for build logs"),
    ] = LOGS_PATH,
):
    """
    Render every route and write the static site.

    Writes <output>/<route>/index.html for each route plus <output>/404.html.

    Examples:\n

        $ build_site.py build

        $ build_site.py build -o dist -c content --drafts
    """
    log_file = setup_rendering_logger(
        logs / f"build_{now()}", output, content_root=content, include_unpublished=drafts
    )

    site = _make_site(content, config, drafts=drafts, record_events=True)

    try:
        result = site.build(output)
    except TemplateRenderError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\n✓ Built {len(result.pages)} page(s)", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {result.output_dir}")
    typer.echo(f"  Log: {log_file}")


@app.command("routes")
def routes_command(
    content: Annotated[
        Path,
        typer.Option("--content", "-c", help="Root of the content store"),
    ] = CONTENT_PATH,
    config: Annotated[
        Path,
        typer.Option("--config", help="Site configuration file (optional)"),
    ] = SITE_CONFIG_PATH,
):
    """List every route the site serves, in build order."""
    site = _make_site(content, config)
    for route in site.routes():
        typer.echo(route)


@app.command("show")
def show_command(
    path: Annotated[str, typer.Argument(help="Route to render (e.g. /blog/hello-world/)")],
    content: Annotated[
        Path,
        typer.Option("--content", "-c", help="Root of the content store"),
    ] = CONTENT_PATH,
    config: Annotated[
        Path,
        typer.Option("--config", help="Site configuration file (optional)"),
    ] = SITE_CONFIG_PATH,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="List unpublished posts alongside published ones"),
    ] = False,
):
    """
    Render a single route and print its HTML.

    Exits with code 1 when the route is not found.

    Examples:\n

        $ build_site.py show /

        $ build_site.py show /projects/lawbot/
    """
    site = _make_site(content, config, drafts=drafts)
    page = site.render_route(path)

    if not page.found:
        typer.secho(f"✗ Not found: {page.path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(page.html)


@app.command("list")
def list_command(
    category: Annotated[
        str,
        typer.Argument(help="Content category: blog, experiences or ventures"),
    ],
    content: Annotated[
        Path,
        typer.Option("--content", "-c", help="Root of the content store"),
    ] = CONTENT_PATH,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Include unpublished posts"),
    ] = False,
):
    """
    List a content category in display order.

    Examples:\n

        $ build_site.py list blog

        $ build_site.py list ventures
    """
    try:
        content_category = ContentCategory.from_name(category)
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    repository = ContentRepository(content)

    if content_category is ContentCategory.POSTS:
        for record in repository.all_posts(include_unpublished=drafts):
            marker = "" if record.metadata.published is not False else "  (unpublished)"
            typer.echo(f"{record.metadata.date.isoformat()}  {record.slug}  {record.metadata.title}{marker}")
    elif content_category is ContentCategory.EXPERIENCES:
        for record in repository.all_experiences():
            meta = record.metadata
            typer.echo(f"{record.slug}  {meta.title} @ {meta.company} ({meta.start_date} - {meta.end_date})")
    else:
        for record in repository.all_ventures():
            meta = record.metadata
            featured = " *" if meta.featured else ""
            typer.echo(f"{record.slug}  {meta.title} [{meta.status.value}]{featured}")


@app.command("events")
def events_command(
    n: int = typer.Option(10, "--num", "-n", help="Number of recent events to show"),
    slug: Optional[str] = typer.Option(None, "--slug", "-s", help="Filter to events for this item"),
    event_type: Optional[str] = typer.Option(
        None, "--event-type", "-e", help="Filter to events of this type"
    ),
    relative: bool = typer.Option(
        False, "--relative", "-r", help="Show relative timestamps (e.g., '2h ago')"
    ),
    compact: bool = typer.Option(False, "--compact", help="Print raw JSON, one event per line"),
):
    """
    Show the last n build events.

    Examples:\n

        $ build_site.py events

        $ build_site.py events -e content_dropped -n 20
    """
    events = get_recent_events(n=n, slug=slug, event_type=event_type)

    if not events:
        typer.secho("No events found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    for event in events:
        if compact:
            typer.echo(json.dumps(event))
            continue

        details = {
            k: v for k, v in event.items() if k not in ("timestamp", "event_type", "slug", "source")
        }
        typer.echo(
            f"{format_timestamp(event.get('timestamp', ''), relative=relative)}  "
            f"{event.get('event_type')}  {event.get('slug')}"
        )
        for key, value in details.items():
            typer.echo(f"    {key}: {value}")


if __name__ == "__main__":
    app()
