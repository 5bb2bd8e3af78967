"""CLI command: inlinecss inline -- inline stylesheets into an HTML file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from inlinecss.config import InlinerConfig
from inlinecss.engine import Inliner
from inlinecss.errors import InlineError


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--css",
    "css_files",
    multiple=True,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Stylesheet to inline; repeat to apply several in order.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result here instead of stdout.",
)
@click.option("--parser", default="html.parser", show_default=True, help="BeautifulSoup tree builder.")
@click.option(
    "--ignore-pseudo",
    multiple=True,
    help="Extra pseudo-class whose rules are never inlined (repeatable).",
)
def inline(
    htmlfile: str,
    css_files: tuple[str, ...],
    output: str | None,
    parser: str,
    ignore_pseudo: tuple[str, ...],
) -> None:
    """Inline the given stylesheets into HTMLFILE."""
    html = Path(htmlfile).read_text(encoding="utf-8")
    css = "\n".join(Path(path).read_text(encoding="utf-8") for path in css_files)
    config = InlinerConfig(html_parser=parser).with_ignored(*ignore_pseudo)

    try:
        result = Inliner(config).inline(html, css)
    except InlineError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result, nl=False)
