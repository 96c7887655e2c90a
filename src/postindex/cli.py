"""Command line interface for postindex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from postindex.config import AppConfig
from postindex.errors import PostIndexError
from postindex.index.indexer import Indexer


console = Console()
app = typer.Typer(help="postindex - build the posts.json search index for the blog")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(
    source: Optional[Path],
    output: Optional[Path] = None,
    url_prefix: Optional[str] = None,
    document_name: Optional[str] = None,
    include_drafts: bool = False,
) -> AppConfig:
    defaults = AppConfig()
    try:
        return AppConfig(
            source_dir=source if source is not None else defaults.source_dir,
            output_path=output if output is not None else defaults.output_path,
            url_prefix=url_prefix if url_prefix is not None else defaults.url_prefix,
            document_name=document_name if document_name is not None else defaults.document_name,
            include_drafts=include_drafts,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--document-name") from exc


@app.command()
def build(
    source: Path = typer.Option(None, "--source", help="Content directory, one subdirectory per post"),
    output: Path = typer.Option(None, "--output", help="Destination of the JSON index"),
    url_prefix: str = typer.Option(None, "--url-prefix", help="Prefix prepended to each post slug"),
    document_name: str = typer.Option(None, "--document-name", help="Primary document inside each post directory"),
    include_drafts: bool = typer.Option(False, "--include-drafts", help="Index posts marked draft: true"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan the content directory and write the posts index."""
    _setup_logging(verbose)
    config = _build_config(source, output, url_prefix, document_name, include_drafts)
    indexer = Indexer(config, base_dir=Path.cwd())

    try:
        stats = indexer.run()
    except PostIndexError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if not stats.records:
        console.print("[yellow]No posts found.[/yellow]")
    console.print(f"Wrote {stats.included} posts to [bold]{escape(str(stats.output_path))}[/bold]")
    if stats.problems:
        console.print(f"[yellow]Skipped {len(stats.problems)} posts, run 'check' for details.[/yellow]")


@app.command()
def check(
    source: Path = typer.Option(None, "--source", help="Content directory, one subdirectory per post"),
    document_name: str = typer.Option(None, "--document-name", help="Primary document inside each post directory"),
    include_drafts: bool = typer.Option(False, "--include-drafts", help="Treat posts marked draft: true as valid"),
    strict: bool = typer.Option(False, "--strict", help="Exit with status 1 if any post would be skipped"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Report which posts would be indexed or skipped, without writing."""
    _setup_logging(verbose)
    config = _build_config(source, document_name=document_name, include_drafts=include_drafts)
    indexer = Indexer(config, base_dir=Path.cwd())

    try:
        stats = indexer.collect()
    except PostIndexError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"Indexable posts: {stats.included}")
    if not stats.skipped:
        console.print("[green]Nothing skipped.[/green]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Directory")
    table.add_column("Reason")
    table.add_column("Detail")
    for item in stats.skipped:
        table.add_row(escape(item.slug), item.reason.value, escape(item.detail))
    console.print(table)

    if strict and stats.problems:
        raise typer.Exit(code=1)
