"""mkcert binary provisioning.

Resolves the pre-built mkcert release for the running host, keeps a copy in
``<cache_root>/mkcert`` and downloads it from the GitHub release page on a
cache miss.
"""

import http.client
import os
import platform
import tempfile
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from rich.console import Console

from devcert.model.config import MKCERT_DOWNLOAD_BASE_URL, MKCERT_VERSION, DevcertConfig
from devcert.model.validation import DevcertError, DownloadFailed, UnsupportedPlatform

console = Console(stderr=True)

SUPPORTED_SYSTEMS = ("windows", "darwin", "linux")

# Host names for the same CPU that differ from the release names
_MACHINE_ALIASES = {"aarch64": "arm64"}

BINARY_MODE = 0o755


def resolve_binary_identifier(os_name: str, arch: str, version: str = MKCERT_VERSION) -> str:
    """Map a target descriptor to the mkcert release filename.

    Args:
        os_name: One of windows, darwin, linux
        arch: CPU architecture; x86_64 is published as amd64
        version: mkcert release tag

    Returns:
        Release asset name, e.g. mkcert-v1.4.4-linux-amd64

    Raises:
        UnsupportedPlatform: If os_name has no mkcert release
    """
    if os_name not in SUPPORTED_SYSTEMS:
        raise UnsupportedPlatform(os_name)

    if arch == "x86_64":
        arch = "amd64"

    name = f"mkcert-{version}-{os_name}-{arch}"
    if os_name == "windows":
        return f"{name}.exe"
    return name


@dataclass(frozen=True)
class Target:
    """Operating system and architecture to provision for."""

    os_name: str
    arch: str

    def binary_identifier(self, version: str = MKCERT_VERSION) -> str:
        return resolve_binary_identifier(self.os_name, self.arch, version)


def detect_target(
    system: str | None = None,
    machine: str | None = None,
) -> Target:
    """Describe the running host.

    Args:
        system: Override for platform.system()
        machine: Override for platform.machine()

    Returns:
        Target for the host. Unsupported systems are reported later by
        resolve_binary_identifier.
    """
    os_name = (system if system is not None else platform.system()).lower()
    arch = (machine if machine is not None else platform.machine()).lower()
    return Target(os_name=os_name, arch=_MACHINE_ALIASES.get(arch, arch))


class BinaryProvisioner:
    """Provide a runnable mkcert binary, downloading it once per version."""

    def __init__(
        self,
        cache_root: Path,
        *,
        version: str = MKCERT_VERSION,
        base_url: str = MKCERT_DOWNLOAD_BASE_URL,
        target: Target | None = None,
        opener: Callable[[str], Any] | None = None,
    ) -> None:
        self.cache_root = cache_root
        self.version = version
        self.base_url = base_url.rstrip("/")
        self.target = target if target is not None else detect_target()
        self._opener = opener if opener is not None else urllib.request.urlopen

    @classmethod
    def from_config(cls, config: DevcertConfig, cache_root: Path, **kwargs: Any) -> "BinaryProvisioner":
        """Build a provisioner from configuration."""
        return cls(
            cache_root,
            version=config.tool_version,
            base_url=config.download_base_url,
            **kwargs,
        )

    def binary_identifier(self) -> str:
        """Release asset name for the target at the pinned version."""
        return self.target.binary_identifier(self.version)

    @property
    def cache_dir(self) -> Path:
        return self.cache_root / "mkcert"

    def binary_path(self) -> Path:
        """Expected on-disk location of the cached binary."""
        return self.cache_dir / self.binary_identifier()

    def download_url(self) -> str:
        return f"{self.base_url}/{self.version}/{self.binary_identifier()}"

    def ensure_binary(self) -> Path:
        """Return the path of a runnable mkcert binary.

        An existing file in the cache is returned as is. Otherwise the release
        asset is downloaded and written with mode 0755.

        Returns:
            Path to the executable

        Raises:
            UnsupportedPlatform: If the host OS has no mkcert release
            DownloadFailed: If the release cannot be fetched
            DevcertError: If the binary cannot be written to the cache
        """
        # Resolve first so unsupported hosts never touch disk or network
        binary_path = self.binary_path()

        try:
            if binary_path.exists():
                console.print(f"[dim]Binary exists, using cached version {binary_path}[/dim]")
                return binary_path

            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DevcertError(
                f"Failed to prepare cache directory {self.cache_dir}: {e}",
                code="CACHE_DIR_FAILED",
            ) from e

        url = self.download_url()
        console.print("[dim]Downloading mkcert package...[/dim]")
        data = self._download(url)

        console.print("[dim]Download response was successful, writing to disk[/dim]")
        self._persist(binary_path, data)

        console.print(f"[dim]Binary path {binary_path}[/dim]")
        return binary_path

    def _download(self, url: str) -> bytes:
        try:
            with self._opener(url) as response:
                status = getattr(response, "status", None)
                if status is not None and not 200 <= status < 300:
                    raise DownloadFailed(url, status)
                data = response.read()
        except urllib.error.HTTPError as e:
            raise DownloadFailed(url, e.code) from e
        except urllib.error.URLError as e:
            raise DownloadFailed(url, None, str(e.reason)) from e
        except (OSError, http.client.HTTPException) as e:
            raise DownloadFailed(url, None, str(e) or type(e).__name__) from e

        if not data:
            raise DownloadFailed(url, status, "empty response body")
        return data

    def _persist(self, binary_path: Path, data: bytes) -> None:
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.cache_dir,
                prefix=f".{binary_path.name}.",
                suffix=".part",
            )
        except OSError as e:
            raise DevcertError(
                f"Failed to write mkcert binary to {binary_path}: {e}",
                code="BINARY_WRITE_FAILED",
            ) from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_path, BINARY_MODE)
            os.replace(tmp_path, binary_path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise DevcertError(
                f"Failed to write mkcert binary to {binary_path}: {e}",
                code="BINARY_WRITE_FAILED",
            ) from e
