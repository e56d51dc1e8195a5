"""Per-user cache directory resolution."""

import os
import platform
from pathlib import Path

APP_NAME = "devcert"


def default_cache_root(system: str | None = None, home: Path | None = None) -> Path:
    """Return the per-user cache directory for devcert.

    Args:
        system: OS name as reported by platform.system(). Defaults to the host.
        home: Home directory. Defaults to Path.home().

    Returns:
        Cache root path (not created)
    """
    if system is None:
        system = platform.system()
    if home is None:
        home = Path.home()

    system = system.lower()

    if system == "windows":
        local_app_data = os.environ.get("LOCALAPPDATA")
        base = Path(local_app_data) if local_app_data else home / "AppData" / "Local"
        return base / APP_NAME

    if system == "darwin":
        return home / "Library" / "Caches" / APP_NAME

    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache) / APP_NAME
    return home / ".cache" / APP_NAME
