import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from tfcount.cli import main

PLAN_JSON = json.dumps(
    {"resource_changes": [{"type": "google_bucket", "change": {"actions": ["update"]}}]}
).encode()


def _fake_tool():
    calls = []

    def fake(cmd, *args, **kwargs):
        calls.append(list(cmd))
        if cmd[1] == "plan":
            out = next(a[len("-out="):] for a in cmd if a.startswith("-out="))
            Path(out).write_text("plan")
            return subprocess.CompletedProcess(cmd, 0)
        return subprocess.CompletedProcess(cmd, 0, stdout=PLAN_JSON)

    return fake, calls


def _run(argv, capsys):
    try:
        code = main(argv)
    except SystemExit as exc:
        code = exc.code
    captured = capsys.readouterr()
    return (0 if code is None else code), captured.out + captured.err


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["-v"])
    assert info.value.code == 0
    assert capsys.readouterr().out == "tfcount version dev\n"


def test_version_flag_on_plan(capsys):
    code, output = _run(["plan", "--version"], capsys)
    assert code == 0
    assert output == "plan version dev\n"


def test_no_command_shows_help(capsys):
    code, output = _run([], capsys)
    assert code == 0
    assert "plan" in output
    assert "Usage:" in output


def test_invalid_output_format(capsys):
    code, output = _run(["plan", "-o", "json"], capsys)
    assert code == 1
    assert "invalid output format 'json'" in output


def test_plan_passes_tool_args(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    fake, calls = _fake_tool()
    with patch.object(subprocess, "run", side_effect=fake):
        code, output = _run(["plan", "-g", "-o", "tree", "--", "-var=env=prod"], capsys)
    assert code == 0
    assert calls[0] == ["terragrunt", "plan", "-out=tfplan.out", "-var=env=prod"]
    assert calls[1] == ["terragrunt", "show", "-json", "tfplan.out"]
    assert "    ~ update: 1" in output.splitlines()
    assert "✅ terragrunt plan summary completed successfully!" in output
    assert not (tmp_path / "tfplan.out").exists()


def test_plan_tool_failure_exits_with_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with patch.object(subprocess, "run", return_value=subprocess.CompletedProcess([], 3)):
        code, output = _run(["plan"], capsys)
    assert code == 1
    assert "failed to generate plan: error running terraform plan: exit status 3" in output