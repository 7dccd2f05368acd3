"""Running shell commands."""

from __future__ import annotations

import subprocess


class CommandError(RuntimeError):
    """A shell command could not be run or exited with a non-zero status."""

    def __init__(
        self,
        command: str,
        message: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def execute(command: str) -> str:
    """Run command with ``sh -c`` and return its standard output.

    Raises CommandError when the shell cannot be started or the command fails.
    """
    try:
        completed = subprocess.run(
            ["sh", "-c", command],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise CommandError(command, str(exc)) from exc
    if completed.returncode != 0:
        raise CommandError(
            command,
            f"exit status {completed.returncode}",
            completed.returncode,
            completed.stdout,
            completed.stderr,
        )
    return completed.stdout