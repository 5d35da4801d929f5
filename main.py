import logging
import sys
from typing import Optional

import typer

from config import settings
from library_patterns.catalog import Catalog
from library_patterns.notifications import LoggingSink
from library_patterns.scenario import run_scenario
from library_patterns.services.isbn_adapter import ExternalIsbnSystem, IsbnAdapter
from library_patterns.ui_helpers import set_output_mode, print_isbn_result, print_list_result, print_stats_result

# Configure logging (stderr)
logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

APP_NAME = settings.app_name


def _version_callback(value: bool) -> None:
    if value:
        print(f"{APP_NAME} {settings.app_version}")
        raise typer.Exit()


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """Global CLI options (e.g. output mode)."""
    if output:
        try:
            set_output_mode(output)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--output")

def run_demo(show_books: bool = False) -> None:
    """Run the borrow/return scenario against the process-wide catalog."""
    catalog = Catalog.instance()
    isbn = IsbnAdapter(ExternalIsbnSystem())
    if settings.log_events:
        events = LoggingSink()
        # Events are INFO records; let them through even when LOG_LEVEL is higher
        events.logger.setLevel(events.level)
        catalog.register_sink(events)
    try:
        run_scenario(catalog, isbn)
    except (LookupError, ValueError) as e:
        logger.error(f"Scenario aborted: {e}")
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    if show_books:
        print_list_result(catalog.list_books())
        print_stats_result(catalog.get_statistics())

@app.command("demo")
def cli_demo(
    show_books: bool = typer.Option(False, "--show-books", "-b", help="Print the final inventory and statistics"),
):
    """Register books, notify administrators, then borrow and return a book."""
    run_demo(show_books=show_books)

@app.command("isbn")
def cli_isbn():
    """Print the ISBN code obtained through the external system adapter."""
    print_isbn_result(IsbnAdapter(ExternalIsbnSystem()).get_code())


def main() -> None:
    if len(sys.argv) > 1:
        app()
    else:
        try:
            run_demo()
        except typer.Exit as e:
            sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
