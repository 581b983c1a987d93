"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from output details.
- Tagged lines are printed without markup, highlighting or wrapping so that
  output stays byte-identical between runs and terminals.
"""

from __future__ import annotations

from rich.console import Console

from core.domain.models import SearchSummary

NO_STRUCTURED_CONTENT = "No structured content found in response"


def build_console(*, stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


def print_line(console: Console, message: str) -> None:
    console.print(message, markup=False)


def print_info(console: Console, message: str) -> None:
    print_line(console, f"[INFO] {message}")


def print_error(console: Console, message: str) -> None:
    print_line(console, f"[ERROR] {message}")


def summary_lines(summary: SearchSummary | None) -> list[str]:
    """Lines printed for a finished search."""

    if summary is None:
        return [NO_STRUCTURED_CONTENT]

    lines = [f"Found {summary.count} result(s)"]
    first = summary.first
    if first is None:
        return lines
    if first.title is not None:
        lines.append(f"Title: {first.title}")
    if first.body is not None:
        lines.append(f"Body: {first.body}")
    if first.link is not None:
        lines.append(f"Link: {first.link}")
    return lines


def print_summary(console: Console, summary: SearchSummary | None) -> None:
    for line in summary_lines(summary):
        print_line(console, line)
