#!/usr/bin/env python3
"""
Validate every file in the content store against its category schema.

Reports each failing file with the offending fields and exits with code 1 when
any file is invalid, so it can gate a build in CI.
"""

from pathlib import Path
from typing import Optional

import typer

from vitrine.contexts.content import ContentCategory, ContentError, ContentLoader
from vitrine.contexts.content.loader import CONTENT_PATH
from vitrine.contexts.content.logger import setup_content_logger
from vitrine.utils.event_logging import LOGS_PATH
from vitrine.utils.timestamp import now

app = typer.Typer(
    add_completion=False,
    help="Validate content files against their metadata schemas",
)


@app.command()
def main(
    content: Path = typer.Option(CONTENT_PATH, "--content", "-c", help="Root of the content store"),
    category: Optional[str] = typer.Option(
        None, "--category", help="Only validate this category (blog, experiences, ventures)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report failures"),
    logs: Path = typer.Option(LOGS_PATH, "--logs", help="Directory for validation logs"),
):
    """
    Validate content files.

    Examples:\n

        $ python scripts/validate_content.py

        $ python scripts/validate_content.py --category blog -q
    """
    if category:
        try:
            categories = [ContentCategory.from_name(category)]
        except ValueError as e:
            typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    else:
        categories = list(ContentCategory)

    loader = ContentLoader(content)
    inventory = {c.directory: len(loader.list_slugs(c)) for c in categories}
    setup_content_logger(logs / f"validate_{now()}", content, inventory=inventory)

    checked = 0
    failures = 0

    for content_category in categories:
        slugs = loader.list_slugs(content_category)
        if not quiet:
            typer.secho(
                f"\n{content_category.directory} ({len(slugs)} file(s))", fg=typer.colors.BLUE, bold=True
            )

        for slug in slugs:
            checked += 1
            try:
                loader.load_record(content_category, slug)
            except ContentError as e:
                failures += 1
                typer.secho(f"✗ {content_category.directory}/{slug}: {e}", fg=typer.colors.RED)
                continue

            if not quiet:
                typer.secho(f"✓ {slug}", fg=typer.colors.GREEN)

    typer.echo("")
    if failures:
        typer.secho(f"{failures} of {checked} file(s) invalid", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho(f"All {checked} file(s) valid", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()
