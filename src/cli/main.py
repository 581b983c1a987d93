"""learncli command line entry point.

The command line is deliberately loose: the framework's own option parsing
and `--help` are turned off and the raw tokens go to
`core.services.command_dispatch`, which decides between the greetings, the
usage message and a remote documentation search.
"""

from __future__ import annotations

import logging
import sys
from functools import partial

import click
import typer
from pydantic import ValidationError
from rich.logging import RichHandler
from typer.core import TyperCommand

from cli.ui_components import (
    build_console,
    print_error,
    print_info,
    print_line,
    print_summary,
)
from core.config import AppSettings
from core.services.command_dispatch import classify, greeting_for
from core.services.docs_search import EXIT_FAILURE, SearchHooks, run_docs_search

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Say hello, or search the documentation with `docs -q <query>`.",
)

_RAW_TOKENS = "learncli.raw_tokens"

_console = build_console()
_err_console = build_console(stderr=True)


def configure_logging(*, debug: bool) -> None:
    """Send step-by-step tracing to stdout when debug is enabled."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_console, show_path=False)],
        force=True,
    )


class RawTokensCommand(TyperCommand):
    """Keeps argv exactly as typed; Click drops a literal `--` while parsing."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[_RAW_TOKENS] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawTokensCommand,
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def learn(
    ctx: typer.Context,
    tokens: list[str] | None = typer.Argument(
        None,
        metavar="[docs|code] [-q QUERY]",
        show_default=False,
    ),
) -> None:
    """Dispatch on the first token; `docs -q <query>` searches the remote docs."""

    request = classify(ctx.meta.get(_RAW_TOKENS, tokens or []))
    greeting = greeting_for(request)
    if greeting is not None:
        print_line(_console, greeting)
        return

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(code=EXIT_FAILURE)

    configure_logging(debug=settings.debug)
    logger.debug("Request: %s", request)

    hooks = SearchHooks(
        info=partial(print_info, _console),
        error=partial(print_error, _err_console),
        result=partial(print_summary, _console),
    )
    status = run_docs_search(request.query or "", settings=settings, hooks=hooks)
    if status != 0:
        raise typer.Exit(code=status)


def run() -> None:
    # Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    app()


if __name__ == "__main__":
    run()
