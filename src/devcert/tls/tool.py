"""mkcert process bindings."""

import subprocess
from pathlib import Path
from typing import Protocol

from devcert.model.validation import ProcessInvocationFailed
from devcert.utils.cmd import run_cmd


class CertTool(Protocol):
    """Operations the certificate flow needs from the CA helper."""

    def install_ca_and_emit_cert(self, key_path: Path, cert_path: Path, hostname: str) -> int:
        """Install the local root CA and write a leaf key/cert pair. Returns the exit status."""
        ...

    def query_ca_root(self) -> str:
        """Return the directory holding the root CA."""
        ...


class MkcertTool:
    """CertTool backed by an mkcert executable."""

    def __init__(self, binary_path: Path) -> None:
        self.binary_path = binary_path

    def install_ca_and_emit_cert(self, key_path: Path, cert_path: Path, hostname: str) -> int:
        """Run ``mkcert -install -key-file KEY -cert-file CERT HOSTNAME``.

        stdin stays attached so password prompts for the trust store reach
        the user; mkcert's own output is discarded.

        Raises:
            ProcessInvocationFailed: If the binary cannot be started
        """
        cmd = [
            self.binary_path,
            "-install",
            "-key-file",
            key_path,
            "-cert-file",
            cert_path,
            hostname,
        ]
        try:
            result = run_cmd(
                cmd,
                check=False,
                capture_output=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ProcessInvocationFailed(f"Failed to run {self.binary_path}: {e}") from e
        return result.returncode

    def query_ca_root(self) -> str:
        """Run ``mkcert -CAROOT`` and return its output.

        Raises:
            ProcessInvocationFailed: If the binary cannot be started or exits non-zero
        """
        try:
            result = run_cmd([self.binary_path, "-CAROOT"], check=False)
        except (OSError, subprocess.SubprocessError) as e:
            raise ProcessInvocationFailed(f"Failed to run {self.binary_path}: {e}") from e

        if result.returncode != 0:
            raise ProcessInvocationFailed(
                f"mkcert -CAROOT exited with status {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout.strip()
