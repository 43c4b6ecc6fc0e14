"""Counting and displaying the resource changes of a Terraform plan."""

from __future__ import annotations

import json
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table
from rich.text import Text

Counts = dict[str, dict[str, int]]

OUTPUT_FORMATS = ("table", "tree")
SUMMARY_HEADER = "📊 Resource Change Summary:"
NO_CHANGES = "📊 No resource changes detected."


@dataclass(frozen=True)
class ActionStyle:
    """The symbol and colour used to show a plan action."""

    symbol: str
    color: str


_STYLES = {
    "create": ActionStyle("+", "green"),
    "update": ActionStyle("~", "yellow"),
    "delete": ActionStyle("-", "red"),
    "replace": ActionStyle("±", "magenta"),
    "read": ActionStyle("○", "blue"),
}
_UNKNOWN_STYLE = ActionStyle("?", "cyan")


def action_style(action: str) -> ActionStyle:
    """Return the display style for a plan action."""
    return _STYLES.get(action, _UNKNOWN_STYLE)


def extract_out_flag(args: Iterable[str]) -> tuple[str | None, list[str]]:
    """Split a ``-out`` flag from tool arguments.

    Returns the plan file named by ``-out FILE`` or ``-out=FILE`` (the last one
    wins, ``None`` if absent) and the remaining arguments in order.
    """
    out_file: str | None = None
    filtered: list[str] = []
    remaining = iter(args)
    pending = list(args) if not isinstance(args, list) else args
    remaining = iter(pending)
    for arg in remaining:
        if arg == "-out":
            value = next(remaining, None)
            if value is None:
                filtered.append(arg)
            else:
                out_file = value
        elif arg.startswith("-out=") and len(arg) > len("-out="):
            out_file = arg[len("-out="):]
        else:
            filtered.append(arg)
    return out_file, filtered


def format_args_for_display(args: Iterable[str]) -> str:
    """Join command arguments for display."""
    return " ".join(args)


def _invalid(reason: str) -> ValueError:
    return ValueError(f"error parsing plan JSON: {reason}")


def parse_plan_and_summarize(plan_json: bytes | str) -> Counts:
    """Count the non no-op actions of a plan's JSON per resource type and action.

    Raises ValueError when the document is not valid plan JSON.
    """
    try:
        plan = json.loads(plan_json)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise _invalid(str(exc)) from exc

    if plan is None:
        return {}
    if not isinstance(plan, dict):
        raise _invalid("expected a JSON object")

    changes = plan.get("resource_changes") or []
    if not isinstance(changes, list):
        raise _invalid("resource_changes must be a list")

    counts: defaultdict[str, defaultdict[str, int]] = defaultdict(lambda: defaultdict(int))
    for change in changes:
        if change is None:
            continue
        if not isinstance(change, dict):
            raise _invalid("resource change must be an object")
        resource_type = change.get("type") or ""
        if not isinstance(resource_type, str):
            raise _invalid("resource type must be a string")
        detail = change.get("change") or {}
        if not isinstance(detail, dict):
            raise _invalid("change must be an object")
        actions = detail.get("actions") or []
        if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
            raise _invalid("actions must be a list of strings")
        for action in actions:
            if action != "no-op":
                counts[resource_type][action] += 1

    return {resource_type: dict(actions) for resource_type, actions in counts.items()}


def sorted_rows(counts: Mapping[str, Mapping[str, int]]) -> list[tuple[str, str, int]]:
    """Flatten counts into (resource type, action, count) rows in sorted order."""
    return [
        (resource_type, action, count)
        for resource_type in sorted(counts)
        for action, count in sorted(counts[resource_type].items())
    ]


def render_table(counts: Mapping[str, Mapping[str, int]], console: Console | None = None) -> None:
    """Print the summary as a bordered table."""
    if console is None:
        console = Console()
    console.print(SUMMARY_HEADER, markup=False, highlight=False)
    console.print()

    table = Table(show_lines=True, header_style="bold cyan")
    table.add_column(Text("Resource Type", justify="center"), justify="left")
    for heading in ("Action", "Count", "Symbol"):
        table.add_column(Text(heading, justify="center"), justify="center")

    for resource_type, action, count in sorted_rows(counts):
        style = action_style(action)
        colour = f"bold {style.color}"
        table.add_row(
            Text(resource_type),
            Text(action, style=colour),
            Text(str(count)),
            Text(style.symbol, style=colour),
        )
    console.print(table)


def render_tree(counts: Mapping[str, Mapping[str, int]], console: Console | None = None) -> None:
    """Print the summary as resource types with their actions indented beneath."""
    if console is None:
        console = Console()
    console.print(SUMMARY_HEADER, markup=False, highlight=False)
    current_type: str | None = None
    for resource_type, action, count in sorted_rows(counts):
        if resource_type != current_type:
            current_type = resource_type
            console.print(Text(f"{resource_type}:"), highlight=False, soft_wrap=True)
        style = action_style(action)
        line = Text.assemble("    ", (style.symbol, style.color), f" {action}: {count}")
        console.print(line, highlight=False, soft_wrap=True)


def display_summary(
    counts: Mapping[str, Mapping[str, int]],
    output_format: str = "table",
    console: Console | None = None,
) -> None:
    """Print the summary in the requested format, falling back to a table."""
    if console is None:
        console = Console()
    if not counts:
        console.print(NO_CHANGES, markup=False, highlight=False)
        return
    if output_format == "table":
        render_table(counts, console)
    elif output_format == "tree":
        render_tree(counts, console)
    else:
        console.print(
            f"Warning: Unknown output format '{output_format}'. Using table format.",
            markup=False,
            highlight=False,
        )
        render_table(counts, console)