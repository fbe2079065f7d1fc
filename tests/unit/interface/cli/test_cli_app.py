from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the CLI in-process and verifies rendered output, exit codes and
the split between the report (stdout) and problems (stderr).
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirsize.core.services import collector
from dirsize.domain.errors import TraversalError
from dirsize.interface.cli import app
from dirsize.utils.i18n import i18n


@pytest.fixture(autouse=True)
def restore_locale():
    """Leave the shared translator in English for other tests."""
    yield
    i18n.load_locale("en")


def test_cli_prints_sorted_table(sample_root: Path, capsys) -> None:
    """TC-01: The reference tree renders as an ascending table."""
    code = app.main(["--root", str(sample_root), "--sort", "ASK"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out[0].split() == ["Name", "Type", "Size"]
    assert [line.split()[0] for line in out[1:]] == ["a.txt", "b.txt", "sub"]
    assert out[3].endswith("4.88 Kb")


def test_cli_descending(sample_root: Path, capsys) -> None:
    """TC-02: DESC reverses the order."""
    assert app.main(["--root", str(sample_root), "--sort", "DESC"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in out[1:]] == ["sub", "b.txt", "a.txt"]


def test_cli_json_output(sample_root: Path, capsys) -> None:
    """TC-03: --json emits the structured report."""
    assert app.main(["--root", str(sample_root), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert data["sort"] == "ASK"
    assert data["partial"] is False
    assert [(e["name"], e["size"]) for e in data["entries"]] == [
        ("a.txt", 10), ("b.txt", 2048), ("sub", 5000),
    ]


def test_cli_missing_root_prints_nothing(tmp_path: Path, capsys) -> None:
    """TC-04: An unreadable root aborts with no report on stdout."""
    code = app.main(["--root", str(tmp_path / "missing")])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "ERROR:" in captured.err


def test_cli_blank_root_is_usage_error(capsys) -> None:
    """TC-05: A blank --root is rejected before scanning."""
    assert app.main(["--root", "  "]) == 2
    err = capsys.readouterr().err
    assert "--root" in err
    assert "usage:" in err


def test_cli_partial_failure_still_reports(sample_root: Path, capsys) -> None:
    """TC-06: A failing entry is reported on stderr and omitted from the table."""
    real_walk = collector.compute_directory_size

    def walk(path: str) -> int:
        if os.path.basename(path) == "sub":
            raise TraversalError(path, FileNotFoundError(2, "No such file or directory"))
        return real_walk(path)

    with patch.object(collector, "compute_directory_size", side_effect=walk):
        code = app.main(["--root", str(sample_root)])

    captured = capsys.readouterr()
    names = [line.split()[0] for line in captured.out.splitlines()[1:]]

    assert code == 0
    assert names == ["a.txt", "b.txt"]
    assert "WARNING: sub:" in captured.err
    # Reported once, by the CLI; the collector's own log stays below WARNING
    assert [line for line in captured.err.splitlines() if "WARNING" in line] == [
        line for line in captured.err.splitlines() if line.startswith("WARNING: sub:")
    ]
    assert "Skipping" not in captured.err


def test_cli_russian_headers(sample_root: Path, capsys) -> None:
    """TC-07: --lang switches user-facing strings."""
    assert app.main(["--root", str(sample_root), "--lang", "ru"]) == 0
    header = capsys.readouterr().out.splitlines()[0]
    assert header.split() == ["Имя", "Тип", "Размер"]


def test_cli_unexpected_error_exit_code(sample_root: Path, capsys) -> None:
    """TC-08: Unexpected failures map to exit code 1."""
    with patch.object(app, "run_scan", side_effect=RuntimeError("boom")):
        code = app.main(["--root", str(sample_root)])

    assert code == 1
    assert "boom" in capsys.readouterr().err


def test_cli_writes_log_file(sample_root: Path, tmp_path: Path) -> None:
    """TC-09: --log-file persists debug diagnostics once the run ends."""
    log_file = tmp_path / "logs" / "dirsize.log"
    assert app.main(["--root", str(sample_root), "--debug", "--log-file", str(log_file)]) == 0

    content = log_file.read_text(encoding="utf-8")
    assert "Scan finished" in content
