from __future__ import annotations

import json
import tempfile
from pathlib import Path

from smb_security_copilot.cli.main import main


def test_smb_plan_cli_smoke(mid_risk, capsys) -> None:
    with tempfile.TemporaryDirectory(prefix="smb-plan-") as temp_dir:
        tmp = Path(temp_dir)
        input_path = tmp / "answers.json"
        output_path = tmp / "out" / "plan.json"
        input_path.write_text(json.dumps(mid_risk), encoding="utf-8")

        code = main([str(input_path), "--out", str(output_path)])

        assert code == 0
        result = json.loads(output_path.read_text(encoding="utf-8"))
        assert result["score"] == 0
        assert [step["id"] for step in result["steps"]] == ["mfa", "backup", "pwdmgr", "endpoint", "email"]
        assert "vendors" not in result["steps"][0]

    out = capsys.readouterr().out
    assert "score=0" in out
    assert "steps=mfa,backup,pwdmgr,endpoint,email" in out


def test_smb_plan_cli_with_vendor_override(best_case) -> None:
    best_case["remote"] = "Some"
    with tempfile.TemporaryDirectory(prefix="smb-plan-") as temp_dir:
        tmp = Path(temp_dir)
        input_path = tmp / "answers.json"
        catalog_path = tmp / "affiliates.json"
        output_path = tmp / "plan.json"
        input_path.write_text(json.dumps(best_case), encoding="utf-8")
        catalog_path.write_text(
            json.dumps({"vpn": [{"name": "Tunnel Co", "url": "https://tunnel.test"}]}),
            encoding="utf-8",
        )

        code = main(
            [str(input_path), "--out", str(output_path), "--affiliates", str(catalog_path), "--include-vendors"]
        )

        assert code == 0
        result = json.loads(output_path.read_text(encoding="utf-8"))
        assert result["score"] == 92
        assert result["steps"][0]["vendors"] == [
            {"name": "Tunnel Co", "url": "https://tunnel.test", "blurb": "", "affiliate": False}
        ]


def test_smb_plan_cli_rejects_incomplete_answers(best_case, capsys) -> None:
    del best_case["pii"]
    with tempfile.TemporaryDirectory(prefix="smb-plan-") as temp_dir:
        input_path = Path(temp_dir) / "answers.json"
        output_path = Path(temp_dir) / "plan.json"
        input_path.write_text(json.dumps(best_case), encoding="utf-8")

        code = main([str(input_path), "--out", str(output_path)])

        assert code == 2
        assert not output_path.exists()
    assert "error: pii: missing" in capsys.readouterr().err


def test_smb_plan_cli_rejects_non_object_input(capsys) -> None:
    with tempfile.TemporaryDirectory(prefix="smb-plan-") as temp_dir:
        input_path = Path(temp_dir) / "answers.json"
        input_path.write_text("[1, 2]", encoding="utf-8")
        assert main([str(input_path), "--out", str(Path(temp_dir) / "plan.json")]) == 2
    assert "error: invalid input" in capsys.readouterr().err


def test_smb_plan_cli_missing_file(capsys) -> None:
    assert main(["does-not-exist.json"]) == 2
    assert "input file not found" in capsys.readouterr().err


def test_smb_plan_cli_lists_questions(capsys) -> None:
    assert main(["--list-questions"]) == 0
    questions = json.loads(capsys.readouterr().out)
    assert questions[0]["key"] == "employees"
    assert len(questions) == 10


def test_smb_plan_cli_reports_unreadable_input(mid_risk, monkeypatch, capsys) -> None:
    import smb_security_copilot.cli.main as cli_main

    def _unreadable(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(cli_main, "load_answers_file", _unreadable)
    with tempfile.TemporaryDirectory(prefix="smb-plan-") as temp_dir:
        input_path = Path(temp_dir) / "answers.json"
        input_path.write_text(json.dumps(mid_risk), encoding="utf-8")
        assert main([str(input_path), "--out", str(Path(temp_dir) / "plan.json")]) == 2
    assert "error: invalid input: " in capsys.readouterr().err
