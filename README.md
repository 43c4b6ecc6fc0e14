# tfcount

`tfcount` runs `terraform plan` (or `terragrunt plan`) for you. It reads the
resulting plan with `show -json` and prints a short summary of the planned
changes, counted by resource type and action.

## Installation

```
pip install .
```

The `tfcount` command needs `terraform` on your `PATH`, or `terragrunt` when
you use `--terragrunt`.

## Usage

Summarize a plan in the current directory:

```
tfcount plan
```

Use terragrunt instead of terraform:

```
tfcount plan --terragrunt      # or -g
```

Pick the output format with `-o`/`--output`: `table` (the default) or `tree`.
Any other value is rejected before anything is run.

```
tfcount plan -o tree
```

Pass native arguments through to the tool after `--`:

```
tfcount plan -- -var="environment=prod"
tfcount plan --terragrunt -- -var-file="vars/prod.tfvars"
```

If you don't pass `-out`, the plan is written to `tfplan.out` and removed once
the summary has been printed, or when the plan fails. If you pass `-out=FILE`
or `-out FILE`, that file is used and left in place; when `-out` is given more
than once, the last one wins.

Show the version or the help:

```
tfcount --version     # or -v; prints "tfcount version dev"
tfcount --help        # or -h
tfcount plan --help
```

When the tool fails or its JSON cannot be read, `tfcount` prints the error and
exits with status 1.

## Output

Every action other than `no-op` is counted. Actions are shown with these
symbols and colours:

| Action  | Symbol | Colour  |
|---------|--------|---------|
| create  | `+`    | green   |
| update  | `~`    | yellow  |
| delete  | `-`    | red     |
| replace | `±`    | magenta |
| read    | `○`    | blue    |
| other   | `?`    | cyan    |

The `table` format prints a bordered table with the columns Resource Type,
Action, Count and Symbol. The `tree` format prints each resource type followed
by its actions, indented, one per line:

```
📊 Resource Change Summary:
aws_instance:
    + create: 2
    - delete: 1
```

Resource types and actions are listed in alphabetical order. When nothing
changes, `tfcount` prints `📊 No resource changes detected.` A successful run
ends with `✅ terraform plan summary completed successfully!` (or `terragrunt`).

## Using it from Python

`tfcount.summary` works on plan JSON without running any tool:

- `parse_plan_and_summarize(plan_json)` takes the output of `show -json`
  (bytes or str) and returns `{resource_type: {action: count}}`; it raises
  `ValueError` on JSON that is not a plan.
- `display_summary(counts, output_format="table", console=None)` prints the
  summary with `rich`; `render_table` and `render_tree` print one format each.
- `sorted_rows(counts)` returns `(resource_type, action, count)` tuples in
  display order, and `action_style(action)` returns the `ActionStyle`
  (symbol and colour) for an action.
- `extract_out_flag(args)` splits a `-out` flag from tool arguments.

`tfcount.runner.run_plan(extra_args, use_terragrunt, output_format, console)`
does the whole run and raises `tfcount.runner.PlanError` on failure.

## What it does not do

`tfcount` only counts actions per resource type. It does not show attribute
diffs or resource addresses, does not apply plans, and does not install or
locate terraform or terragrunt beyond running them from your `PATH`.

## Running the tests

```
pip install ".[test]"
pytest
```