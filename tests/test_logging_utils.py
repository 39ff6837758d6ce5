"""Tests for logging_utils.py."""

import io
import logging

from ukol_provisioner.logging_utils import ProgressReporter, configure_logging


class TestProgressReporter:
    def test_numbering_starts_at_one_and_increments(self):
        out = io.StringIO()
        reporter = ProgressReporter(out)

        assert reporter.announce("first") == 1
        assert reporter.announce("second") == 2
        assert out.getvalue() == "1) first\n2) second\n"

    def test_success_is_followed_by_blank_line(self):
        out = io.StringIO()

        ProgressReporter(out).success("done")

        assert out.getvalue() == "SUCCESS: done\n\n"

    def test_failure(self):
        out = io.StringIO()

        ProgressReporter(out).failure("broken")

        assert out.getvalue() == "ERROR: broken\n"

    def test_output_skips_empty_text(self):
        out = io.StringIO()
        reporter = ProgressReporter(out)

        reporter.output("")
        reporter.output("line one\nline two\n")

        assert out.getvalue() == "line one\nline two\n"

    def test_defaults_to_stdout(self, capsys):
        ProgressReporter().announce("hello")

        assert capsys.readouterr().out == "1) hello\n"


class TestConfigureLogging:
    def test_writes_to_requested_file(self, tmp_path):
        log_path = tmp_path / "logs" / "provision.log"

        actual = configure_logging(log_path=str(log_path), also_console=False)
        logging.getLogger("ukol_provisioner.test").info("hello from test")
        for h in logging.getLogger().handlers:
            h.flush()

        assert actual == str(log_path)
        assert "hello from test" in log_path.read_text(encoding="utf-8")

    def test_second_call_is_a_no_op(self, tmp_path):
        first = configure_logging(log_path=str(tmp_path / "a.log"), also_console=False)
        handlers = list(logging.getLogger().handlers)

        second = configure_logging(log_path=str(tmp_path / "b.log"), also_console=False)

        assert second == first
        assert logging.getLogger().handlers == handlers
        assert not (tmp_path / "b.log").exists()

    def test_falls_back_to_working_directory(self, tmp_path, monkeypatch):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        actual = configure_logging(log_path=str(blocker / "provision.log"), also_console=False)

        assert actual == str(tmp_path / "ukol-provisioner.log")

    def test_console_only_when_no_file_is_writable(self, tmp_path, monkeypatch):
        def refuse(*args, **kwargs):
            raise PermissionError("read-only file system")

        monkeypatch.setattr("ukol_provisioner.logging_utils.logging.FileHandler", refuse)
        monkeypatch.chdir(tmp_path)
        before = list(logging.getLogger().handlers)

        actual = configure_logging(log_path=str(tmp_path / "provision.log"), also_console=False)

        added = [h for h in logging.getLogger().handlers if h not in before]
        assert actual is None
        assert [type(h) for h in added] == [logging.StreamHandler]
        assert not (tmp_path / "provision.log").exists()
