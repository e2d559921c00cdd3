"""Tests for the command-line interface."""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from suicide_risk_detector.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, model_dir: Path, *args: str, **kwargs):
    return runner.invoke(
        main,
        ["--model-dir", str(model_dir), "--log-level", "WARNING", *args],
        **kwargs,
    )


class TestClassifyCommand:
    def test_json_output(self, runner, model_dir):
        result = _invoke(runner, model_dir, "classify", "suicide hopeless burden", "-o", "json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["prediction"] == "suicide"
        assert data["risk_level"] == "moderate"
        assert data["tokens_processed"] == 3

    def test_rich_output_lists_hotlines_when_at_risk(self, runner, model_dir):
        result = _invoke(runner, model_dir, "classify", "I feel hopeless and alone")
        assert result.exit_code == 0, result.output
        assert "MODERATE" in result.output
        assert "988" in result.output

    def test_rich_output_low_risk(self, runner, model_dir):
        result = _invoke(runner, model_dir, "classify", "happy love family")
        assert result.exit_code == 0, result.output
        assert "non-suicide" in result.output
        assert "988" not in result.output

    def test_reads_stdin(self, runner, model_dir):
        result = _invoke(runner, model_dir, "classify", "-o", "json", input="the and of\n")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["confidence"] == 0.5
        assert "message" in data

    def test_reads_file(self, runner, model_dir, tmp_path):
        file = tmp_path / "post.txt"
        file.write_text("happy love family", encoding="utf-8")
        result = _invoke(runner, model_dir, "classify", "--file", str(file), "-o", "json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["prediction"] == "non-suicide"

    def test_file_with_invalid_utf8(self, runner, model_dir, tmp_path):
        file = tmp_path / "post.txt"
        file.write_bytes(b"I feel hopeless \xff\xfe caf\xe9")
        result = _invoke(runner, model_dir, "classify", "--file", str(file), "-o", "json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["prediction"] == "suicide"
        assert data["preprocessed_text"] == "feel hopeless caf"

    def test_blank_text_exits_2(self, runner, model_dir):
        result = _invoke(runner, model_dir, "classify", "   ")
        assert result.exit_code == 2
        assert "provide text" in result.output

    def test_missing_model_files_exits_1(self, runner, tmp_path):
        result = _invoke(runner, tmp_path / "missing", "classify", "hello there")
        assert result.exit_code == 1
        assert "Error" in result.output


class TestBatchCommand:
    def test_json_output(self, runner, model_dir, tmp_path):
        file = tmp_path / "posts.txt"
        file.write_text("suicide hopeless burden\n\nhappy love family\n", encoding="utf-8")
        result = _invoke(runner, model_dir, "batch", str(file), "-o", "json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [d["prediction"] for d in data] == ["suicide", "non-suicide"]

    def test_rich_output(self, runner, model_dir, tmp_path):
        file = tmp_path / "posts.txt"
        file.write_text("suicide hopeless burden\nhappy love family\n", encoding="utf-8")
        result = _invoke(runner, model_dir, "batch", str(file))
        assert result.exit_code == 0, result.output
        assert "Flagged: 1 of 2" in result.output

    def test_latin1_file(self, runner, model_dir, tmp_path):
        file = tmp_path / "posts.txt"
        file.write_bytes("happy love family\ncaf\u00e9 suicide hopeless\n".encode("latin-1"))
        result = _invoke(runner, model_dir, "batch", str(file), "-o", "json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [d["prediction"] for d in data] == ["non-suicide", "suicide"]


class TestEvaluateCommand:
    @pytest.fixture
    def labeled_csv(self, tmp_path) -> Path:
        path = tmp_path / "labeled.csv"
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["text", "class"])
            writer.writerow(["I am hopeless and a burden", "suicide"])
            writer.writerow(["happy with my family", "non-suicide"])
        return path

    def test_json_metrics(self, runner, model_dir, labeled_csv):
        result = _invoke(runner, model_dir, "evaluate", str(labeled_csv), "-o", "json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["accuracy"] == 1.0

    def test_rich_summary(self, runner, model_dir, labeled_csv):
        result = _invoke(runner, model_dir, "evaluate", str(labeled_csv))
        assert result.exit_code == 0, result.output
        assert "Accuracy: 100.00%" in result.output

    def test_missing_column(self, runner, model_dir, labeled_csv):
        result = _invoke(
            runner, model_dir, "evaluate", str(labeled_csv), "--label-column", "label"
        )
        assert result.exit_code == 2
        assert "label" in result.output


class TestInfoCommands:
    def test_model_info_json(self, runner, model_dir):
        result = _invoke(runner, model_dir, "model-info", "-o", "json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["vocabulary_size"] == 10
        assert data["classes"] == ["non-suicide", "suicide"]

    def test_model_info_rich(self, runner, model_dir):
        result = _invoke(runner, model_dir, "model-info")
        assert result.exit_code == 0, result.output
        assert "Linear SVM" in result.output

    def test_resources_without_model_files(self, runner, tmp_path):
        result = _invoke(runner, tmp_path / "missing", "resources", "-o", "json")
        assert result.exit_code == 0, result.output
        hotlines = json.loads(result.output)["hotlines"]
        assert hotlines[0]["number"] == "988"
        assert len(hotlines) == 3
