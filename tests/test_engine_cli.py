import json
import shutil
from pathlib import Path

import pytest

from declsort.cli.formatter import IssueFormatter
from declsort.cli.main import main
from declsort.core.config import parse_config
from declsort.core.engine import AuditEngine
from declsort.core.errors import ConfigurationError
from declsort.core.models import Issue
from declsort.frontend.codec import load_document

FIXTURES = Path(__file__).parent / "fixtures"
SAMPLE = FIXTURES / "sample_module.yaml"

CLEAN_YAML = (
    "tokens:\n"
    "  - [at_op, 1, 1, '@']\n"
    "  - [identifier, 1, 2, type]\n"
    "  - [identifier, 1, 7, apple]\n"
    "  - [eol, 1, 20, 1]\n"
    "ast:\n"
    "  node: module\n"
    "  name: Clean\n"
    "  body:\n"
    "    - {node: import, line: 2, target: {node: alias, segments: [Apple]}}\n"
    "    - {node: import, line: 3, target: {node: alias, segments: [Banana]}}\n"
)


def test_engine_runs_all_checks_in_order():
    report = AuditEngine().audit_document(load_document(SAMPLE))

    assert report["status"] == "ISSUES"
    assert report["checks_run"] == ["import_order", "deps_order", "typespec_order"]
    assert [(i.check_id, i.line, i.trigger) for i in report["issues"]] == [
        ("EX9001", 2, "Cherry"),
        ("EX9002", 0, "plug"),
        ("EX9003", 6, "banana"),
    ]


def test_engine_scan_reports_broken_files_and_continues(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("- not a mapping\n")
    clean = tmp_path / "clean.yaml"
    clean.write_text(CLEAN_YAML)

    progress = []
    engine = AuditEngine()
    reports = engine.scan([broken, clean], progress_callback=lambda done, total: progress.append((done, total)))

    assert [r["status"] for r in reports] == ["ENGINE_ERROR", "CLEAN"]
    assert progress == [(1, 2), (2, 2)]

    summary = engine.generate_summary(reports)
    assert summary["total_files"] == 2
    assert summary["clean"] == 1
    assert summary["system_errors"] == 1
    assert summary["total_issues"] == 0


def test_engine_summary_counts_by_check():
    engine = AuditEngine()
    summary = engine.generate_summary([engine.audit_document(load_document(SAMPLE))])

    assert summary["by_check"] == {"import_order": 1, "deps_order": 1, "typespec_order": 1}
    assert summary["with_issues"] == 1


def test_engine_propagates_deps_configuration_error():
    engine = AuditEngine(parse_config({"checks": {"deps_order": {"sort_method": "ascii"}}}))
    with pytest.raises(ConfigurationError):
        engine.audit_file(SAMPLE)


def test_cli_check_json(capsys):
    exit_code = main(["check", str(SAMPLE), "--format", "json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["summary"]["total_issues"] == 3
    issues = payload["files"][0]["issues"]
    assert issues[0]["message"] == "The import `Cherry` is not alphabetically ordered among its group."
    assert issues[0]["priority"] == "low"


def test_cli_only_and_sort_method(capsys):
    exit_code = main([
        "check", str(SAMPLE), "--format", "json",
        "--only", "typespec_order", "--sort-method", "ascii",
    ])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert [i["check"] for i in payload["files"][0]["issues"]] == ["EX9003"]


def test_cli_clean_directory(tmp_path, capsys):
    (tmp_path / "clean.yaml").write_text(CLEAN_YAML)
    (tmp_path / "README.txt").write_text("ignored")

    assert main(["check", str(tmp_path)]) == 0
    assert "Summary Report" in capsys.readouterr().out


def test_cli_config_file(tmp_path, capsys):
    config = tmp_path / "declsort.yml"
    config.write_text("checks:\n  import_order: {enabled: false}\n  deps_order: {enabled: false}\n")
    target = tmp_path / "sample.yaml"
    shutil.copy(SAMPLE, target)

    exit_code = main(["check", str(target), "--config", str(config), "--format", "json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["summary"]["by_check"] == {"typespec_order": 1}


def test_cli_configuration_error_exit_code(tmp_path, capsys):
    config = tmp_path / "declsort.yml"
    config.write_text("checks:\n  deps_order: {sort_method: ascii}\n")

    assert main(["check", str(SAMPLE), "--config", str(config)]) == 2
    assert "Configuration error" in capsys.readouterr().out


def test_cli_missing_path(tmp_path, capsys):
    assert main(["check", str(tmp_path / "nothing.yaml")]) == 2


def test_cli_explain(capsys):
    assert main(["explain", "deps_order"]) == 0
    out = capsys.readouterr().out
    assert "EX9002" in out
    assert "sort_method" in out


def test_cli_without_command(capsys):
    assert main([]) == 2


def test_engine_scan_continues_past_quoted_line_numbers(tmp_path):
    quoted = tmp_path / "quoted.yaml"
    quoted.write_text("tokens:\n  - [at_op, '2', 3, '@']\n  - [eol, '2', 4, 1]\n")
    clean = tmp_path / "clean.yaml"
    clean.write_text(CLEAN_YAML)

    reports = AuditEngine().scan([quoted, clean])

    assert [r["status"] for r in reports] == ["ENGINE_ERROR", "CLEAN"]
    assert "line" in reports[0]["error"]


def test_formatter_prints_brackets_literally(capsys):
    formatter = IssueFormatter()
    formatter.print_file_report({"file_path": "x.yaml", "status": "ENGINE_ERROR", "error": "bad [type, line] row"})
    formatter.print_file_report({
        "file_path": "y.yaml", "status": "ISSUES",
        "issues": [Issue("EX9002", 3, "dep [bold]x[/bold]", trigger="[x]")],
    })
    out = capsys.readouterr().out

    assert "bad [type, line] row" in out
    assert "[bold]x[/bold]" in out
    assert "[x]" in out


def test_issue_without_trigger_serializes_to_null(capsys):
    issue = Issue("EX9001", 4, "no token to point at")

    assert issue.to_dict()["trigger"] is None
    assert issue.to_dict()["priority"] == "low"
    IssueFormatter().print_file_report({"file_path": "z.yaml", "status": "ISSUES", "issues": [issue]})
    assert "__no_trigger__" not in capsys.readouterr().out
