"""Running terraform or terragrunt to produce and summarise a plan."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from rich.console import Console

from tfcount.summary import (
    OUTPUT_FORMATS,
    display_summary,
    extract_out_flag,
    format_args_for_display,
    parse_plan_and_summarize,
)

DEFAULT_PLAN_FILE = "tfplan.out"


class PlanError(Exception):
    """Raised when a plan cannot be produced, read or summarised."""


def get_binary(use_terragrunt: bool = False) -> str:
    """Return the tool to run."""
    return "terragrunt" if use_terragrunt else "terraform"


def generate_plan_file(binary: str, extra_args: Sequence[str] = ()) -> tuple[str, bool]:
    """Run ``plan`` writing a plan file.

    Returns the plan file name and whether the user supplied it with ``-out``.
    """
    out_file, filtered = extract_out_flag(list(extra_args))
    user_provided = bool(out_file)
    plan_file = out_file if user_provided else DEFAULT_PLAN_FILE

    args = ["plan", f"-out={plan_file}", *filtered]
    print(f"Running {binary} {format_args_for_display(args)}", flush=True)

    try:
        result = subprocess.run([binary, *args])
    except OSError as exc:
        failure = str(exc)
    else:
        if result.returncode == 0:
            return plan_file, user_provided
        failure = f"exit status {result.returncode}"

    if not user_provided:
        try:
            os.remove(plan_file)
        except OSError:
            pass
    raise PlanError(f"error running {binary} plan: {failure}")


def extract_plan_json(binary: str, plan_file: str) -> bytes:
    """Run ``show -json`` on a plan file and return its output."""
    print(f"Running {binary} show -json {plan_file}", flush=True)
    try:
        result = subprocess.run([binary, "show", "-json", plan_file], stdout=subprocess.PIPE)
    except OSError as exc:
        raise PlanError(f"error running {binary} show: {exc}") from exc
    if result.returncode != 0:
        raise PlanError(f"error running {binary} show: exit status {result.returncode}")
    return result.stdout or b""


def cleanup(plan_file: str) -> None:
    """Remove a plan file; a missing file is not an error."""
    try:
        os.remove(plan_file)
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise PlanError(f"failed to remove {plan_file}: {exc}") from exc


def run_plan(
    extra_args: Sequence[str] = (),
    use_terragrunt: bool = False,
    output_format: str = "table",
    console: Console | None = None,
) -> None:
    """Plan, summarise the changes and print the summary."""
    if output_format not in OUTPUT_FORMATS:
        raise PlanError(
            f"invalid output format '{output_format}'. Supported formats: 'table', 'tree'"
        )
    if console is None:
        console = Console()

    binary = get_binary(use_terragrunt)
    try:
        plan_file, user_provided = generate_plan_file(binary, extra_args)
    except PlanError as exc:
        raise PlanError(f"failed to generate plan: {exc}") from exc

    try:
        try:
            plan_json = extract_plan_json(binary, plan_file)
        except PlanError as exc:
            raise PlanError(f"failed to extract plan JSON: {exc}") from exc
        try:
            counts = parse_plan_and_summarize(plan_json)
        except ValueError as exc:
            raise PlanError(f"failed to parse plan: {exc}") from exc
        display_summary(counts, output_format, console)
        console.print(
            f"✅ {binary} plan summary completed successfully!", markup=False, highlight=False
        )
    finally:
        if not user_provided:
            try:
                cleanup(plan_file)
            except PlanError as exc:
                print(f"Warning: failed to cleanup plan file: {exc}")