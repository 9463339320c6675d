"""CLI commands for blog-organizer using Typer."""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blog_organizer.config import get_settings
from blog_organizer.core.category_manager import CategoryManager
from blog_organizer.core.organizer import create_organizer
from blog_organizer.errors import OrganizerError
from blog_organizer.utils.logging import setup_logging


app = typer.Typer(
    name="blog-organizer",
    help="File staged blog posts into categories and refresh the index pages",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _relative(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return path


def _fail(exc: OrganizerError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    raise typer.Exit(1)


# --- Run Command ---


@app.command()
def run():
    """Move staged posts into category folders and rewrite the indexes."""
    settings = get_settings()
    setup_logging(level=settings.log_level.upper(), log_file=settings.log_file)
    organizer = create_organizer(settings)

    try:
        report = organizer.run()
    except OrganizerError as exc:
        _fail(exc)

    root = settings.root_dir
    for item in report.ingested:
        target = _relative(item.destination.parent, root)
        console.print(
            f"[green]Moved[/green] {escape(item.source.name)} -> {escape(str(target))}",
            highlight=False,
        )
    for path in report.changed_indexes:
        console.print(f"[cyan]Updated[/cyan] {escape(str(_relative(path, root)))}", highlight=False)

    if not report.ingested and not report.changed_indexes:
        console.print("[dim]Nothing to do[/dim]")


# --- Categories Command ---


@app.command()
def categories():
    """List category folders and their post counts."""
    settings = get_settings()
    manager = CategoryManager(settings)
    try:
        found = manager.list_categories()
    except OrganizerError as exc:
        _fail(exc)

    if not found:
        console.print(f"[yellow]No categories under {settings.category_base_path}[/yellow]")
        return

    table = Table(title="Categories")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("Posts", justify="right")
    for category in found:
        table.add_row(category.name, category.display_name or "", str(category.post_count))
    console.print(table)


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
