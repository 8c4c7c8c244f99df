"""Translate command."""

import sys
from rich.console import Console
from rich.table import Table

from tlahtolli.cli import client

console = Console()

MATCH_STYLES = {
    "exact": "green",
    "root": "cyan",
    "fuzzy": "yellow",
    "none": "red",
}


def add_subparser(subparsers):
    parser = subparsers.add_parser("translate", help="Translate a phrase")
    parser.add_argument("text", help="Text to translate")
    parser.add_argument(
        "-d", "--direction",
        choices=["auto", "na-es", "es-na"],
        default="auto",
        help="Translation direction (default: detect)",
    )
    parser.add_argument("--session", dest="session_id", help="Session ID to record under")
    parser.add_argument("-w", "--words", action="store_true", help="Show per-word matches")
    parser.set_defaults(func=run_translate)


def run_translate(args):
    try:
        result = client.translate(args.text, args.direction, args.session_id)
    except Exception as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    style = MATCH_STYLES.get(result["match_type"], "white")
    console.print(f"[bold]{result['translated_text']}[/bold]")
    console.print(
        f"[dim]{result['detected_language']} → {result['target_language']}  "
        f"confidence {result['confidence']:.2f}[/dim]  [{style}]{result['match_type']}[/{style}]"
    )

    if args.words and result["words"]:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Token")
        table.add_column("Translation")
        table.add_column("Match")
        table.add_column("Score", justify="right")
        for w in result["words"]:
            s = MATCH_STYLES.get(w["match_type"], "white")
            table.add_row(w["token"], w["text"], f"[{s}]{w['match_type']}[/{s}]", f"{w['confidence']:.2f}")
        console.print(table)
