"""CLI command: inlinecss inspect -- report how each selector would inline."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from inlinecss.config import InlinerConfig
from inlinecss.errors import InlineError
from inlinecss.selectors import calculate, ineligibility_reason
from inlinecss.stylesheet import parse_stylesheet


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--ignore-pseudo",
    multiple=True,
    help="Extra pseudo-class to treat as dynamic (repeatable).",
)
def inspect(cssfile: str, ignore_pseudo: tuple[str, ...]) -> None:
    """List every selector in CSSFILE with its specificity and eligibility."""
    config = InlinerConfig().with_ignored(*ignore_pseudo)
    try:
        stylesheet = parse_stylesheet(Path(cssfile).read_text(encoding="utf-8"))
        rows = []
        for index, rule in enumerate(stylesheet.rules, start=1):
            for selector in rule.selectors:
                reason = ineligibility_reason(selector, config.ignored_pseudo_classes)
                specificity = calculate(selector) if reason is None else None
                rows.append((index, selector, specificity, reason, len(rule.declarations)))
    except InlineError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not rows:
        click.echo(f"{Path(cssfile).name}: no rules")
        return

    skipped = 0
    for index, selector, specificity, reason, count in rows:
        status = "inline" if reason is None else f"skip ({reason})"
        if reason is not None:
            skipped += 1
        click.echo(f"rule {index}: {selector}  [{specificity or '-'}]  {count} declaration(s)  {status}")

    click.echo()
    click.echo(f"Summary: {len(rows)} selector(s), {skipped} skipped")
