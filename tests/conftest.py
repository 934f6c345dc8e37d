"""Shared test fixtures and configuration."""

import subprocess
import sys
import tempfile
import textwrap
from pathlib import Path

import pytest


def run_git(repo_dir: Path, *args: str, input: bytes = None) -> str:
    """Run a git command in ``repo_dir`` and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_dir,
        input=input,
        capture_output=True,
        check=True,
    )
    return result.stdout.decode()


def stage_file(repo_dir: Path, rel_path: str, content: str) -> Path:
    """Write ``content`` to ``rel_path`` and add it to the index."""
    path = repo_dir / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    run_git(repo_dir, "add", rel_path)
    return path


def staged_content(repo_dir: Path, rel_path: str) -> str:
    """Return the content of ``rel_path`` as recorded in the index."""
    return run_git(repo_dir, "show", f":{rel_path}")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def no_global_config(mocker, tmp_path):
    """Keep the user's ~/.formatstaged/config.yaml out of the tests."""
    mocker.patch(
        "formatstaged.config.get_global_config_file",
        return_value=tmp_path / "global-config" / "config.yaml",
    )


@pytest.fixture
def temp_repo(tmp_path):
    """Create a temporary git repository for testing."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    # Initialize git repo
    run_git(repo_dir, "init")
    run_git(repo_dir, "config", "user.email", "test@example.com")
    run_git(repo_dir, "config", "user.name", "Test User")
    run_git(repo_dir, "config", "core.autocrlf", "false")
    run_git(repo_dir, "config", "commit.gpgsign", "false")

    # Create initial commit
    stage_file(repo_dir, "README.md", "# Test Repo\n")
    run_git(repo_dir, "commit", "-m", "Initial commit")

    return repo_dir.resolve()


@pytest.fixture
def spacing_formatter(tmp_path):
    """Formatter that rewrites ``name=value`` lines as ``name = value``."""
    script = tmp_path / "spacing_fmt.py"
    script.write_text(
        textwrap.dedent(
            """\
            import re
            import sys

            for name in sys.argv[1:]:
                with open(name, newline="") as f:
                    text = f.read()
                text = re.sub(r"(?m)^(\\w+)=(\\S)", r"\\1 = \\2", text)
                with open(name, "w", newline="") as f:
                    f.write(text)
            """
        )
    )
    return [sys.executable, str(script)]


@pytest.fixture
def noop_formatter():
    """Formatter that succeeds without touching its inputs."""
    return [sys.executable, "-c", "pass"]


@pytest.fixture
def failing_formatter():
    """Formatter that clobbers its inputs and then exits with status 3."""
    code = textwrap.dedent(
        """\
        import sys
        for name in sys.argv[1:]:
            with open(name, "w") as f:
                f.write("garbage\\n")
        sys.exit(3)
        """
    )
    return [sys.executable, "-c", code]
