"""A long-lived shell that runs terminal commands for the explorer."""

from __future__ import annotations

import logging
import subprocess
import threading
import time

__all__ = ["ShellSession", "escape_terminal_output", "terminal_output_script"]

_log = logging.getLogger(__name__)


def escape_terminal_output(text: str) -> str:
    """Escape text for a double-quoted script string; newlines become \\n\\r."""
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n\\r")


def terminal_output_script(text: str) -> str:
    """Build the script call that shows text in the embedded terminal."""
    return f'window.displayTerminalOutput("{escape_terminal_output(text)}");'


class ShellSession:
    """A shell process fed commands on stdin, with its stdout collected by line.

    After a command that starts with "cd", ``current_dir`` holds what ``pwd``
    printed.
    """

    def __init__(self, shell: str = "sh", delay: float = 0.1) -> None:
        self.delay = delay
        self.current_dir: str | None = None
        self._lines: list[str] = []
        self._lock = threading.Lock()
        self._process = subprocess.Popen(
            [shell],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            bufsize=1,
        )
        self._reader = threading.Thread(target=self._read_output, daemon=True)
        self._reader.start()
        _log.info("Successfully created shell instance")

    def _read_output(self) -> None:
        stdout = self._process.stdout
        assert stdout is not None
        for line in stdout:
            with self._lock:
                self._lines.append(line.rstrip("\n"))

    def __enter__(self) -> ShellSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._process.stdin is None or self._process.stdin.closed

    def _write(self, command: str) -> None:
        if self.closed:
            raise RuntimeError("shell session is closed")
        stdin = self._process.stdin
        try:
            stdin.write(command + "\n")
            stdin.flush()
        except (BrokenPipeError, OSError) as error:
            raise RuntimeError("failed to write to shell") from error

    def _collected(self, separator: str) -> str:
        with self._lock:
            return separator.join(self._lines)

    def send_command(self, command: str) -> str:
        """Run a command, wait briefly and return the lines it printed."""
        with self._lock:
            self._lines.clear()
        _log.info("Sending command to shell instance")
        self._write(command)
        time.sleep(self.delay)
        output = self._collected("\n")

        if command.startswith("cd"):
            self._write("pwd")
            time.sleep(self.delay)
            self.current_dir = self._collected("")
        return output

    def close(self) -> None:
        """End the shell process."""
        if not self.closed:
            try:
                self._process.stdin.close()
            except OSError:
                pass
        try:
            self._process.wait(timeout=2)
        except subprocess.TimeoutExpired:
            self._process.kill()
            self._process.wait()
        self._reader.join(timeout=2)
        if self._process.stdout is not None:
            self._process.stdout.close()