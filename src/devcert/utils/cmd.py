"""Run external tools, echoing the command line unless --quiet."""

import subprocess
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)

_show_commands = True


def set_show_commands(show: bool) -> None:
    """Enable or disable echoing of executed commands."""
    global _show_commands
    _show_commands = show


def format_cmd(cmd: list[str | Path]) -> str:
    """Render a command line for display, single-quoting risky arguments."""
    parts = []
    for arg in map(str, cmd):
        if " " in arg or any(c in arg for c in "'\"$\\"):
            arg = "'" + arg.replace("'", "'\\''") + "'"
        parts.append(arg)
    return " ".join(parts)


def run_cmd(
    cmd: list[str | Path],
    *,
    check: bool = True,
    capture_output: bool = True,
    show: bool | None = None,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run a command as text, optionally echoing it first.

    Args:
        cmd: Executable and arguments; Path entries are converted to str
        check: Raise CalledProcessError on non-zero exit code
        capture_output: Capture stdout/stderr
        show: Override the --quiet setting for this call
        **kwargs: Additional subprocess.run arguments (e.g. stdout=DEVNULL)

    Returns:
        CompletedProcess result
    """
    if show is None:
        show = _show_commands

    if show:
        console.print(f"[dim]$ {escape(format_cmd(cmd))}[/dim]", highlight=False)

    return subprocess.run(
        [str(arg) for arg in cmd],
        check=check,
        capture_output=capture_output,
        text=True,
        **kwargs,
    )
