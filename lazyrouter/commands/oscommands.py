"""OS-level collaborator: clipboard, browser, editor and shell commands.

Failures come back as ``HandlerError`` so key handlers can let them propagate
to the dispatcher like git failures.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
import webbrowser
from collections.abc import Callable
from pathlib import Path

from ..errors import HandlerError

logger = logging.getLogger(__name__)

_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip.exe",),
)


class OSCommand:
    def __init__(
        self,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        open_browser: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        self._runner = runner
        self._open_browser = open_browser

    def _clipboard_command(self) -> tuple[str, ...] | None:
        for cmd in _CLIPBOARD_COMMANDS:
            if shutil.which(cmd[0]):
                return cmd
        return None

    def copy_to_clipboard(self, text: str) -> None:
        cmd = self._clipboard_command()
        if cmd is None:
            raise HandlerError("No clipboard command found (pbcopy, wl-copy, xclip, xsel).")
        try:
            proc = self._runner(list(cmd), input=text, text=True, check=False)
        except OSError as exc:
            raise HandlerError(f"Failed to copy to clipboard: {exc}") from exc
        if proc.returncode != 0:
            raise HandlerError(f"{cmd[0]} exited with {proc.returncode}")

    def open_link(self, url: str) -> None:
        logger.info("opening %s", url)
        if not self._open_browser(url):
            raise HandlerError(f"Could not open {url}")

    def open_file(self, path: Path) -> None:
        if sys.platform == "darwin":
            cmd = ["open", str(path)]
        elif os.name == "nt":
            cmd = ["cmd", "/c", "start", "", str(path)]
        else:
            cmd = ["xdg-open", str(path)]
        self.run_command(cmd)

    def edit_file(
        self,
        path: Path,
        disable_tui_mode: Callable[[], None] = lambda: None,
        enable_tui_mode: Callable[[], None] = lambda: None,
    ) -> None:
        """Run ``$EDITOR`` on ``path`` while the TUI is suspended."""
        editor_env = os.environ.get("VISUAL", "").strip() or os.environ.get("EDITOR", "").strip()
        if not editor_env:
            raise HandlerError("Cannot edit: $EDITOR is not set.")
        cmd = shlex.split(editor_env)
        if not cmd:
            raise HandlerError("Cannot edit: $EDITOR is empty.")
        disable_tui_mode()
        try:
            self.run_command([*cmd, str(path)])
        finally:
            enable_tui_mode()

    def run_command(self, cmd: list[str], cwd: Path | None = None) -> str:
        logger.info("running %s", " ".join(cmd))
        try:
            proc = self._runner(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise HandlerError(f"Failed to run {cmd[0]}: {exc}") from exc
        if proc.returncode != 0:
            raise HandlerError((proc.stderr or "").strip() or f"{cmd[0]} exited with {proc.returncode}")
        return proc.stdout or ""

    def run_shell(self, command: str, cwd: Path | None = None) -> str:
        shell = os.environ.get("SHELL", "/bin/sh")
        return self.run_command([shell, "-c", command], cwd=cwd)
