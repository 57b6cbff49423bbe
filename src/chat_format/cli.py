"""Command-line interface for Chat Format."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from chat_format import __version__
from chat_format.config import Settings, get_settings
from chat_format.core.formatter import (
    FormatError,
    FormattedMessage,
    MessageFormatter,
    read_text_file,
)
from chat_format.core.models import ChatMessage
from chat_format.formats import SUPPORTED_FORMATS, OutputHandler, get_handler
from chat_format.formats.html_handler import HTMLHandler
from chat_format.formats.terminal_handler import TerminalHandler
from chat_format.formatting.parser import format_reply
from chat_format.logging_config import configure_logging

app = typer.Typer(
    name="chat-format",
    help="Render assistant chat replies as structured, formatted output.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Chat Format v{__version__}")
        raise typer.Exit()


def build_handler(name: str, settings: Settings) -> OutputHandler:
    """Create the handler for a format name, applying settings."""
    handler_class = get_handler(name)
    if handler_class is TerminalHandler:
        return TerminalHandler(
            code_style=settings.code_style,
            width=settings.terminal_width,
        )
    if handler_class is HTMLHandler:
        return HTMLHandler(wrapper_class=settings.html_wrapper_class)
    return handler_class()


def read_source(path: Optional[Path]) -> str:
    """Read the input from a file, or from stdin when no path is given.

    Raises:
        FormatError: If the input is not valid UTF-8
    """
    if path is None:
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise FormatError(f"stdin is not valid UTF-8 text: {e}") from e
    return read_text_file(path)


def message_header(message: ChatMessage) -> str:
    """Role label plus the time the message was sent, when known."""
    header = message.role.value.title()
    if message.created_at is not None:
        header += f" · {message.created_at:%H:%M}"
    return header


def print_transcript(
    handler: TerminalHandler,
    messages: list[FormattedMessage],
) -> None:
    """Print formatted messages under a header each, citations last."""
    for formatted in messages:
        console.rule(f"[bold]{escape(message_header(formatted.message))}[/bold]")
        handler.print(formatted.nodes, console)

        citations = formatted.citation_nodes()
        if citations:
            console.line()
            handler.print(citations, console)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Message file to render (reads stdin when omitted)",
        exists=True,
        dir_okay=False,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: terminal)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendered output to this file instead of stdout",
    ),
    transcript: bool = typer.Option(
        False,
        "--transcript",
        "-t",
        help="Treat the input as a JSON chat transcript instead of one reply",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render assistant chat replies as structured, formatted output.

    Examples:

        python render.py reply.md

        cat reply.md | python render.py --format html

        python render.py chat.json --transcript --format json -o chat-out.json
    """
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        handler = build_handler(output_format or settings.default_format, settings)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    formatter = MessageFormatter()
    try:
        if transcript and path is not None:
            chat = formatter.load_transcript(path)
        elif transcript:
            chat = formatter.parse_transcript(read_source(None), source="<stdin>")
        else:
            raw = read_source(path)
    except FormatError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if transcript:
        messages = formatter.format_transcript(chat)
        if output is None and isinstance(handler, TerminalHandler):
            print_transcript(handler, messages)
            return
        rendered = handler.render_messages(messages)
    else:
        nodes = format_reply(raw)
        if output is not None:
            handler.write(nodes, output)
            console.print(f"[green]Written:[/green] {escape(str(output))}")
            return
        if isinstance(handler, TerminalHandler):
            handler.print(nodes, console)
            return
        rendered = handler.render(nodes)

    if output is not None:
        output.write_text(rendered, encoding="utf-8")
        console.print(f"[green]Written:[/green] {escape(str(output))}")
    else:
        typer.echo(rendered)


if __name__ == "__main__":
    app()
