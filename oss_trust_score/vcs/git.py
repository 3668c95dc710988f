"""
Version-control collaborator: materializes repositories on local storage.

Working trees are scratch directories created per invocation so that two
evaluations never share a checkout.
"""

import logging
import shutil
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from oss_trust_score.errors import GitCommandError

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 300


class GitClient:
    """Runs the ``git`` executable for shallow clones and empty inits."""

    def __init__(self, executable: str = "git", timeout: float = GIT_TIMEOUT_SECONDS):
        self.executable = executable
        self.timeout = timeout

    def _run(self, args: list[str], cwd: Path | None = None) -> None:
        command = [self.executable, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            process = subprocess.run(
                command,
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise GitCommandError(command, -1, str(e)) from e

        if process.returncode != 0:
            raise GitCommandError(command, process.returncode, process.stderr)

    def initialize_empty(self, destination: Path) -> None:
        """Create an empty repository (default branch ``main``) at destination."""
        destination.mkdir(parents=True, exist_ok=True)
        self._run(["init", "--initial-branch=main", str(destination)])

    def materialize(self, url: str, destination: Path) -> None:
        """
        Check out the latest commit of url (depth 1) into destination.

        An empty or missing destination is cloned into. A destination that
        already holds a repository (see ``initialize_empty``) fetches the
        remote HEAD and checks it out instead, since git refuses to clone
        into a non-empty directory.
        """
        if (destination / ".git").exists():
            self._run(["fetch", "--depth", "1", url, "HEAD"], cwd=destination)
            self._run(["checkout", "--quiet", "FETCH_HEAD"], cwd=destination)
            return
        self._run(["clone", "--depth", "1", url, str(destination)])


def remove_working_tree(path: Path) -> None:
    """Delete a scratch working tree; missing paths are ignored."""
    if path.exists():
        shutil.rmtree(path, ignore_errors=True)


@contextmanager
def scratch_directory(prefix: str = "oss-trust-score-") -> Iterator[Path]:
    """
    Yield a fresh temporary directory and remove it on exit.

    Cleanup runs unconditionally, whether or not anything was cloned into it.
    """
    path = Path(tempfile.mkdtemp(prefix=prefix))
    try:
        yield path
    finally:
        remove_working_tree(path)
        logger.debug("Removed working tree %s", path)
