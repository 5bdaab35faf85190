"""
CLI interface for EchoBiz.

Provides command-line access to command interpretation and manual entry.
"""

import json
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from echobiz.capture.session import CaptureController, CaptureError
from echobiz.config.loader import EngineSettings, load_settings
from echobiz.core.interpreter import Rejection, interpret as interpret_transcript
from echobiz.core.manual_entry import InvalidManualInput, create_money_event, create_stock_event
from echobiz.core.messages import (
    UNRECOGNIZED_ACK,
    Language,
    acknowledge,
    example_commands,
    format_amount,
    greeting,
)
from echobiz.demo.seed_demo_data import seed_demo_history
from echobiz.storage.history import EventHistory
from echobiz.storage.models import MoneyEvent, MoneyKind, StockAction

app = typer.Typer()
console = Console()

# Exit codes - an unrecognized command is a notice, not a failure
EXIT_CODE_OK = 0
EXIT_CODE_UNRECOGNIZED = 0
EXIT_CODE_INVALID = 1

QUIT_WORDS = {"quit", "exit", "bye"}
RECENT_COUNT = 5


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """EchoBiz voice ledger CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        console.print("EchoBiz - Use --help to see available commands")


def _load_settings_or_exit(config: Optional[str]) -> EngineSettings:
    try:
        return load_settings(config)
    except Exception as e:
        console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_INVALID)


def _parse_language(language: str) -> Language:
    try:
        return Language(language.lower())
    except ValueError:
        valid_languages = [language.value for language in Language]
        console.print(f"[red]Error:[/] language must be one of: {valid_languages}")
        sys.exit(EXIT_CODE_INVALID)


def _print_result(result) -> None:
    if isinstance(result, Rejection):
        console.print(f"[yellow]{UNRECOGNIZED_ACK.title}[/] {UNRECOGNIZED_ACK.description}")
        return
    ack = acknowledge(result)
    console.print(f"[green]{ack.title}[/] {escape(ack.description)}")


@app.command()
def interpret(
    text: str = typer.Argument(..., help="Transcript of the spoken or typed command"),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML config file"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON"
    ),
):
    """
    Interpret a single command.

    Prints the acknowledgement for a credit, debit or stock change, or a
    notice when no action could be detected.
    """
    settings = _load_settings_or_exit(config)
    result = interpret_transcript(text, settings)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        _print_result(result)

    if isinstance(result, Rejection):
        sys.exit(EXIT_CODE_UNRECOGNIZED)
    sys.exit(EXIT_CODE_OK)


@app.command("record-money")
def record_money(
    kind: str = typer.Argument(..., help="credit or debit"),
    amount: str = typer.Argument(..., help="Amount in rupees"),
    person: str = typer.Argument(..., help="Person name"),
):
    """Add a transaction manually."""
    try:
        event = create_money_event(kind, amount, person)
    except InvalidManualInput as e:
        console.print(f"[red]{e.title}:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_INVALID)
    _print_result(event)
    sys.exit(EXIT_CODE_OK)


@app.command("record-stock")
def record_stock(
    action: str = typer.Argument(..., help="added or reduced"),
    item: str = typer.Argument(..., help="Item name"),
    quantity: str = typer.Argument(..., help="Number of units"),
):
    """Add a stock change manually."""
    try:
        event = create_stock_event(action, item, quantity)
    except InvalidManualInput as e:
        console.print(f"[red]{e.title}:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_INVALID)
    _print_result(event)
    sys.exit(EXIT_CODE_OK)


@app.command()
def examples(
    language: str = typer.Option(
        Language.ENGLISH.value,
        "--language",
        "-L",
        help="hi, en or hinglish"
    ),
):
    """Show the greeting and example commands for a language."""
    lang = _parse_language(language)
    console.print(f"\n[bold]{greeting(lang)}[/bold]")
    console.print("\nExample Commands:")
    for command in example_commands(lang):
        console.print(f'  "{command}"')


def _prompt_source() -> Optional[str]:
    """Read one typed line as a transcript; None at end of input."""
    try:
        return console.input("🎤 > ")
    except EOFError:
        return None
    except KeyboardInterrupt:
        raise CaptureError("Capture interrupted", code="aborted")


def _display_history(history: EventHistory) -> None:
    """Display recent entries in a clean, ledger format."""
    table = Table(title="Recent Transactions")
    table.add_column("Type")
    table.add_column("Details")
    table.add_column("Amount / Qty", justify="right")
    table.add_column("Time")

    for event in history.recent(RECENT_COUNT):
        time_str = event.occurred_at.strftime("%H:%M:%S")
        if isinstance(event, MoneyEvent):
            if event.kind == MoneyKind.CREDIT:
                table.add_row("[green]credit[/]", f"Received from {escape(event.counterparty)}",
                              f"+{format_amount(event.amount)}", time_str)
            else:
                table.add_row("[red]debit[/]", f"Paid to {escape(event.counterparty)}",
                              f"-{format_amount(event.amount)}", time_str)
        else:
            sign = "+" if event.action == StockAction.ADDED else "-"
            table.add_row(f"stock {event.action.value}", escape(event.item_name),
                          f"{sign}{event.quantity}", time_str)

    console.print(table)
    console.print(f"Net balance: {format_amount(history.net_balance())}")


@app.command()
def session(
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-L",
        help="hi, en or hinglish (defaults to the config language)"
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML config file"
    ),
    demo: bool = typer.Option(
        False,
        "--demo",
        help="Start with the sample transactions"
    ),
):
    """
    Interactive session.

    Each line typed stands in for one captured voice command. Recognized
    commands are added to an in-memory history that is discarded on exit.
    Type 'quit' to end the session.
    """
    settings = _load_settings_or_exit(config)
    lang = _parse_language(language) if language else settings.language
    history = EventHistory(limit=settings.history_limit)
    if demo:
        seed_demo_history(history)

    console.print(f"\n[bold]{greeting(lang)}[/bold]")
    for command in example_commands(lang):
        console.print(f'  [dim]"{command}"[/]')

    controller = CaptureController(_prompt_source)

    def on_error(error: CaptureError) -> None:
        console.print(f"[red]Microphone Error:[/] {escape(str(error))}")

    while True:
        captured = []
        controller.start(on_result=captured.append, on_error=on_error).run()
        if not captured:
            break

        text = captured[0].strip()
        if text.lower() in QUIT_WORDS:
            break
        if not text:
            continue

        console.print(f'Last command: "{escape(text)}"')
        result = interpret_transcript(text, settings)
        if not isinstance(result, Rejection):
            history.record(result)
        _print_result(result)
        _display_history(history)

    controller.stop()
    console.print("Goodbye!")
    sys.exit(EXIT_CODE_OK)


if __name__ == "__main__":
    app()
