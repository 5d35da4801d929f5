import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unsupported output mode: {mode!r}. Use plain, json or rich.")
    os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_isbn_result(code: str) -> None:
    """Print the adapted ISBN code in the current output mode.
    - plain: 'Adapted ISBN code: <code>'
    - json: {"isbn_code": <code>}
    - rich: short Panel
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"isbn_code": code}, ensure_ascii=False))
    elif mode == "rich":
        _console.print(Panel.fit(f"[bold]{code}[/]", title="🔖 Adapted ISBN code", border_style="magenta"))
    else:
        print(f"Adapted ISBN code: {code}")

def print_list_result(books: List[Any]) -> None:
    """Print the book list in the current output mode."""
    mode = get_output_mode()

    if not books:
        print("No books in catalog.")
        return

    if mode == "json":
        payload = [b.to_dict() for b in books]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Status", style="magenta", no_wrap=True)
        for b in books:
            table.add_row(b.title, "borrowed" if b.borrowed else "available")
        _console.print(table)
    else:
        for b in books:
            print(f"{b.title} - {'borrowed' if b.borrowed else 'available'}")

def print_stats_result(stats: Dict[str, Any]) -> None:
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.get('total_books', 0)}\n"
            f"[bold]Borrowed:[/] {stats.get('borrowed_books', 0)}\n"
            f"[bold]Available:[/] {stats.get('available_books', 0)}\n"
            f"[bold]Sinks:[/] {stats.get('sinks', 0)}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.get('total_books', 0)}")
        print(f"Borrowed Books: {stats.get('borrowed_books', 0)}")
        print(f"Available Books: {stats.get('available_books', 0)}")
        print(f"Sinks: {stats.get('sinks', 0)}")
