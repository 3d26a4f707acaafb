"""Integration tests for the check command through the meta launcher."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

from cli.app import meta_launcher
from cli.commands.check import resolve_check_settings
from cli.exit_codes import ExitCode
from core_types import OutputFormatName

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    import pytest


def test_check_clean_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure a balanced file exits cleanly with a zero summary."""
    monkeypatch.chdir(tmp_path)
    path = write_source("ok.c", "int main() {\n\treturn (1 + [2][0]);\n}\n")

    exit_code = meta_launcher("check", str(path))

    assert exit_code == ExitCode.SUCCESS
    assert capsys.readouterr().out == "scan complete: found 0 brace errors\n"


def test_check_reports_findings(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure findings are printed per line and the command exits with FINDINGS."""
    monkeypatch.chdir(tmp_path)
    path = write_source("bad.c", "{\n\t}\n")

    exit_code = meta_launcher("check", str(path))

    assert exit_code == ExitCode.FINDINGS
    assert capsys.readouterr().out.splitlines() == [
        f"{path}:1,1: Closing brace '}}' is indented more than open brace '{{' at 0,0. "
        "Did you forget an open brace or indent too far?",
        f"{path}:0,0: Open brace '{{' has no matching close brace",
        "scan complete: found 2 brace errors",
    ]


def test_check_sums_multiple_files(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure each file is checked independently and totals are summed."""
    monkeypatch.chdir(tmp_path)
    first = write_source("a.c", "{\n")
    second = write_source("b.c", "}\n")

    exit_code = meta_launcher("check", str(first), str(second))

    out = capsys.readouterr().out
    assert exit_code == ExitCode.FINDINGS
    assert out.endswith("scan complete: found 2 brace errors\n")
    assert f"{first}:0,0: Open brace '{{' has no matching close brace" in out
    assert f"{second}:0,0: Missing open brace for closing '}}'" in out


def test_check_no_fail_on_findings(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure findings can be reported without a failing exit code."""
    monkeypatch.chdir(tmp_path)
    path = write_source("bad.c", "(\n")

    exit_code = meta_launcher("check", str(path), "--no-fail-on-findings")

    assert exit_code == ExitCode.SUCCESS
    assert "found 1 brace errors" in capsys.readouterr().out


def test_check_json_output(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure --format json emits a single JSON document."""
    monkeypatch.chdir(tmp_path)
    path = write_source("bad.c", "\t{\n}\n")

    exit_code = meta_launcher("check", str(path), "--format", "json")

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == ExitCode.FINDINGS
    assert payload["error_count"] == 2
    (source,) = payload["sources"]
    assert source["name"] == str(path)
    assert [d["kind"] for d in source["diagnostics"]] == [
        "under_indented_close",
        "unmatched_close",
    ]


def test_check_uses_config_defaults(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure bracecheck.toml values apply when flags are omitted."""
    write_source("bracecheck.toml", '[check]\nformat = "json"\nfail_on_findings = false\n')
    path = write_source("bad.c", ")\n")
    monkeypatch.chdir(tmp_path)

    exit_code = meta_launcher("check", str(path))

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == ExitCode.SUCCESS
    assert payload["error_count"] == 1


def test_check_reads_stdin(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Ensure standard input is scanned when no paths are given."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b")\n")))

    exit_code = meta_launcher("check")

    assert exit_code == ExitCode.FINDINGS
    assert capsys.readouterr().out == (
        "0,0: Missing open brace for closing ')'. Did you forget an open brace?\n"
        "scan complete: found 1 brace errors\n"
    )


def test_check_missing_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Ensure unreadable inputs exit with INPUT_ERROR."""
    monkeypatch.chdir(tmp_path)

    exit_code = meta_launcher("check", str(tmp_path / "missing.c"))

    assert exit_code == ExitCode.INPUT_ERROR


def test_check_replaces_undecodable_bytes(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Ensure malformed bytes are replaced and the scan still completes."""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "latin.c"
    path.write_bytes(b"(\xff)\n[\xfe\n")

    exit_code = meta_launcher("check", str(path))

    assert exit_code == ExitCode.FINDINGS
    assert capsys.readouterr().out.splitlines() == [
        f"{path}:1,0: Open brace '[' has no matching close brace",
        "scan complete: found 1 brace errors",
    ]


def test_check_unknown_encoding(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    write_source: Callable[[str, str], Path],
) -> None:
    """Ensure an unknown --encoding exits with INPUT_ERROR before scanning."""
    monkeypatch.chdir(tmp_path)
    path = write_source("ok.c", "()\n")

    exit_code = meta_launcher("check", str(path), "--encoding", "no-such-codec")

    assert exit_code == ExitCode.INPUT_ERROR
    assert capsys.readouterr().out == ""


def test_check_keeps_bare_carriage_return_inside_line(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Ensure a lone carriage return does not end a line."""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "cr.c"
    path.write_bytes(b"{\r\t}\r}")

    exit_code = meta_launcher("check", str(path))

    assert exit_code == ExitCode.FINDINGS
    assert capsys.readouterr().out.splitlines() == [
        f"{path}:0,5: Missing open brace for closing '}}'. Did you forget an open brace?",
        "scan complete: found 1 brace errors",
    ]


def test_check_stdin_crlf_and_bare_carriage_return(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Ensure standard input honors CRLF terminators but not a lone carriage return."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"(\r\n)\r(\r\n")))

    exit_code = meta_launcher("check")

    assert exit_code == ExitCode.FINDINGS
    assert capsys.readouterr().out == (
        "1,2: Open brace '(' has no matching close brace\n"
        "scan complete: found 1 brace errors\n"
    )


def test_resolve_check_settings_prefers_flags() -> None:
    """Ensure explicit flags override configuration values."""
    config = {"check.format": "json", "check.fail_on_findings": False, "check.encoding": "latin-1"}

    from_config = resolve_check_settings(config)
    overridden = resolve_check_settings(
        config,
        output_format="text",
        fail_on_findings=True,
        encoding="utf-8",
    )

    assert from_config.output_format is OutputFormatName.JSON
    assert from_config.fail_on_findings is False
    assert from_config.encoding == "latin-1"
    assert overridden.output_format is OutputFormatName.TEXT
    assert overridden.fail_on_findings is True
    assert overridden.encoding == "utf-8"
