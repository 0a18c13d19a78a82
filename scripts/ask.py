#!/usr/bin/env python3
"""
Ask the Global Talent Visa assistant a question from the command line.

Usage:
    python scripts/ask.py --question "我符合申请资格吗？"
    python scripts/ask.py --question "我该选哪个路线？" --resume resume.txt
    python scripts/ask.py --guided 2
    python scripts/ask.py --list-guided
    python scripts/ask.py -q "test connection"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from talentvisa.answers import StaticAnswerStore
from talentvisa.assistant import (
    AnswerSource,
    ClientInputError,
    create_resolver,
    parse_chat_request,
)
from talentvisa.config import get_settings


console = Console()

SOURCE_STYLES = {
    AnswerSource.PROBE: "blue",
    AnswerSource.GUIDED: "cyan",
    AnswerSource.MODEL: "green",
    AnswerSource.FALLBACK: "yellow",
}


def configure_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def list_guided_questions() -> None:
    """Print the guided questions with their index."""
    store = StaticAnswerStore()

    table = Table(title="Guided Questions")
    table.add_column("#", style="dim", width=3)
    table.add_column("Question", style="cyan")

    for i, question in enumerate(store.guided_questions, 1):
        table.add_row(str(i), question)

    console.print(table)


def ask(
    question: str,
    resume_path: str | None = None,
    models: list[str] | None = None,
    timeout: float | None = None,
) -> int:
    """Resolve one question and display the answer. Returns an exit code."""
    resume = None
    if resume_path:
        path = Path(resume_path)
        if not path.exists():
            console.print(f"[red]Resume file not found: {path}[/red]")
            return 1
        resume = path.read_text(encoding="utf-8")

    try:
        request = parse_chat_request({"message": question, "resumeContent": resume})
    except ClientInputError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    settings = get_settings()
    overrides = {}
    if models:
        overrides["models"] = models
    if timeout is not None:
        overrides["attempt_timeout_s"] = timeout
    if overrides:
        settings = settings.model_copy(update=overrides)

    resolver = create_resolver(settings=settings)

    console.print(f"\n[bold blue]Question:[/] {request.message}")
    if resume:
        console.print(f"[dim]Resume: {len(resume)} chars[/dim]")
    console.print(
        f"[dim]Models: {', '.join(resolver.config.models)} "
        f"(timeout {resolver.config.attempt_timeout_s:.0f}s each, "
        f"client {'ready' if resolver.model_available else 'unavailable'})[/dim]\n"
    )

    with console.status("Resolving..."):
        result = resolver.resolve(request.message, request.resume_content)

    style = SOURCE_STYLES[result.source]
    title = f"[bold {style}]Answer ({result.source.value})[/]"
    console.print(Panel(Markdown(result.response), title=title, border_style=style))

    console.print(
        f"\n[dim]Stats: source={result.source.value}, "
        f"model={result.model or 'n/a'}, chars={len(result.response)}[/dim]"
    )
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Ask the UK Global Talent Visa assistant"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--question", "-q",
        type=str,
        help="Question to ask",
    )
    group.add_argument(
        "--guided", "-g",
        type=int,
        help="Ask guided question by number (see --list-guided)",
    )
    group.add_argument(
        "--list-guided",
        action="store_true",
        help="List the guided questions and exit",
    )
    parser.add_argument(
        "--resume", "-r",
        type=str,
        default=None,
        help="Path to a plain-text resume used to personalise the answer",
    )
    parser.add_argument(
        "--model", "-m",
        action="append",
        default=None,
        help="Model identifier; repeat to set the fallback order",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Per-model deadline in seconds (default: from settings)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    configure_logging("DEBUG" if args.verbose else get_settings().log_level)

    console.print("\n[bold]UK Global Talent Visa Assistant[/bold]")
    console.print("=" * 50)

    if args.list_guided:
        list_guided_questions()
        return

    question = args.question
    if args.guided is not None:
        guided = StaticAnswerStore().guided_questions
        if not 1 <= args.guided <= len(guided):
            parser.error(f"--guided must be between 1 and {len(guided)}")
        question = guided[args.guided - 1]

    sys.exit(
        ask(
            question=question,
            resume_path=args.resume,
            models=args.model,
            timeout=args.timeout,
        )
    )


if __name__ == "__main__":
    main()
