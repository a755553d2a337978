"""Tests for the CLI shell."""

import json
from datetime import date

import pytest
from click.testing import CliRunner

from entrylogger.cli import main
from entrylogger.input_parsing import resolve_date


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def conf(tmp_path):
    path = tmp_path / "entrylogger.conf"
    path.write_text(f'file_path = "{tmp_path / "data"}"\n')
    return path


def post(runner, conf, *args, **kwargs):
    return runner.invoke(main, ["--config", str(conf), "post", *args], **kwargs)


class TestPost:
    def test_posts_from_options(self, runner, conf, tmp_path):
        result = post(runner, conf, "--date", "13-oct-20", "--time", "morning",
                      "--tag", "fit", "-m", "aerobic (5/5)")

        assert result.exit_code == 0, result.output
        assert "date:13-oct-20 time:morning tag:fit] aerobic (5/5)" in result.output
        stored = (tmp_path / "data" / "entries.txt").read_text()
        assert stored.startswith("[ins:")
        assert stored.endswith("date:13-oct-20 time:morning tag:fit] aerobic (5/5)\n")

    def test_prompts_for_missing_fields(self, runner, conf):
        result = post(runner, conf, input="today\nnight\nfit\nstretching\n")

        assert result.exit_code == 0, result.output
        expected_date = resolve_date("today", today=date.today())
        assert f"date:{expected_date} time:night tag:fit] stretching" in result.output

    def test_normalizes_date(self, runner, conf):
        result = post(runner, conf, "-d", "13-OCT-20", "-t", "n/a", "--tag", "x", "-m", "y")
        assert result.exit_code == 0, result.output
        assert "date:13-oct-20" in result.output

    def test_rejects_bad_tag(self, runner, conf, tmp_path):
        result = post(runner, conf, "-d", "13-oct-20", "-t", "morning", "--tag", "Fit", "-m", "x")

        assert result.exit_code == 2
        assert "Only lowercase alphanumerical characters allowed in tag" in result.output
        assert not (tmp_path / "data" / "entries.txt").exists()

    def test_rejects_bad_time(self, runner, conf):
        result = post(runner, conf, "-d", "13-oct-20", "-t", "noon", "--tag", "fit", "-m", "x")
        assert result.exit_code == 2
        assert "or now" in result.output

    def test_rejects_leading_space_in_message(self, runner, conf):
        result = post(runner, conf, "-d", "13-oct-20", "-t", "morning", "--tag", "fit", "-m", "  hi")
        assert result.exit_code == 2
        assert "Message cannot start with a space" in result.output

    def test_rejects_long_message(self, runner, conf):
        result = post(runner, conf, "-d", "13-oct-20", "-t", "morning", "--tag", "fit", "-m", "a" * 33)
        assert result.exit_code == 2
        assert "Maximum length allowed for message: 32" in result.output


class TestList:
    def test_empty(self, runner, conf):
        result = runner.invoke(main, ["--config", str(conf), "list"])
        assert result.exit_code == 0
        assert "No entries yet." in result.output

    def test_lists_in_order(self, runner, conf):
        post(runner, conf, "-d", "14-oct-20", "-t", "morning", "--tag", "b", "-m", "second")
        post(runner, conf, "-d", "13-oct-20", "-t", "morning", "--tag", "a", "-m", "first")

        result = runner.invoke(main, ["--config", str(conf), "list"])

        lines = result.output.strip().splitlines()
        assert lines[0].endswith("tag:a] first")
        assert lines[1].endswith("tag:b] second")

    def test_json_output(self, runner, conf):
        post(runner, conf, "-d", "13-oct-20", "-t", "morning", "--tag", "fit", "-m", "run")

        result = runner.invoke(main, ["--config", str(conf), "list", "--json"])

        data = json.loads(result.output)
        assert data[0]["tag"] == "fit"
        assert data[0]["message"] == "run"
        assert len(data[0]["ins"]) == 13

    def test_corrupt_file_reports_error(self, runner, conf, tmp_path):
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "entries.txt").write_text("corrupt\n")

        result = runner.invoke(main, ["--config", str(conf), "list"])

        assert result.exit_code == 1
        assert "Error: Couldn't parse string to Entry: corrupt" in result.output


    def test_unorderable_entry_reports_error(self, runner, conf, tmp_path):
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "entries.txt").write_text("[ins:1602579600001 date:garbage time:morning tag:a] y\n")

        result = runner.invoke(main, ["--config", str(conf), "list"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Cannot order entry with date:garbage" in result.output


class TestDigest:
    def test_summary(self, runner, conf):
        post(runner, conf, "-d", "today", "-t", "morning", "--tag", "fit", "-m", "run")
        post(runner, conf, "-d", "13-oct-20", "-t", "morning", "--tag", "work", "-m", "meeting")

        result = runner.invoke(main, ["--config", str(conf), "digest", "--json"])

        data = json.loads(result.output)
        assert data["qty"] == 2
        assert data["tags"] == ["fit", "work"]
        assert data["entries_today"] == 1
        assert data["last_entry"]["tag"] == "fit"
