"""Tests for formatstaged.engine.formatter module."""

import sys

import pytest

from formatstaged.engine import FormatterError, format_command_line, run_formatter


class TestFormatCommandLine:
    """Tests for format_command_line function."""

    def test_quotes_arguments(self):
        """Test that arguments with spaces are shell-quoted."""
        assert format_command_line(["black", "my file.py"]) == "black 'my file.py'"


class TestRunFormatter:
    """Tests for run_formatter function."""

    def test_appends_files(self, temp_dir):
        """Test that target paths follow the command's own arguments."""
        script = "import sys; open('args.txt', 'w').write(' '.join(sys.argv[1:]))"

        run_formatter([sys.executable, "-c", script], ["a.py", "sub/b.py"], temp_dir)

        assert (temp_dir / "args.txt").read_text() == "a.py sub/b.py"

    def test_runs_in_cwd(self, temp_dir):
        """Test that the formatter runs in the given directory."""
        script = "import os; open('cwd.txt', 'w').write(os.getcwd())"

        run_formatter([sys.executable, "-c", script], [], temp_dir)

        assert (temp_dir / "cwd.txt").exists()

    def test_single_invocation(self, mocker, temp_dir):
        """Test that all files go to one child process."""
        mock_run = mocker.patch(
            "formatstaged.engine.formatter.subprocess.run",
            return_value=mocker.MagicMock(returncode=0),
        )

        run_formatter(["fmt", "--write"], ["a", "b", "c"], temp_dir)

        mock_run.assert_called_once()
        assert mock_run.call_args[0][0] == ["fmt", "--write", "a", "b", "c"]

    def test_nonzero_exit(self, temp_dir):
        """Test that the formatter's exit status becomes the exit code."""
        with pytest.raises(FormatterError) as exc_info:
            run_formatter([sys.executable, "-c", "import sys; sys.exit(7)"], [], temp_dir)

        assert exc_info.value.returncode == 7
        assert exc_info.value.exit_code == 7

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_signal(self, temp_dir):
        """Test that a signaled formatter exits with code 1."""
        script = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"

        with pytest.raises(FormatterError) as exc_info:
            run_formatter([sys.executable, "-c", script], [], temp_dir)

        assert exc_info.value.signal == 15
        assert exc_info.value.exit_code == 1
        assert "terminated by a signal" in str(exc_info.value)

    def test_command_not_found(self, temp_dir):
        """Test that a missing executable is reported with the command line."""
        with pytest.raises(FormatterError) as exc_info:
            run_formatter(["formatstaged-no-such-formatter", "--fix"], ["a.py"], temp_dir)

        assert exc_info.value.exit_code == 1
        assert "formatstaged-no-such-formatter --fix a.py" in str(exc_info.value)
