"""Self-signed development certificates via mkcert."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal

from rich.console import Console
from rich.markup import escape

from devcert.model.config import DevcertConfig
from devcert.model.validation import (
    BinaryMissing,
    CertificateFilesNotProduced,
    DevcertError,
    ProcessInvocationFailed,
)
from devcert.tls.provision import BinaryProvisioner
from devcert.tls.tool import CertTool, MkcertTool
from devcert.utils.paths import default_cache_root

console = Console(stderr=True)


@dataclass
class CertificateResult:
    """Result of a certificate generation run."""

    status: Literal["success", "failed"]
    key_path: Path | None = None
    cert_path: Path | None = None
    ca_root: str | None = None
    error: DevcertError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


def certificate_paths(cert_dir: Path, hostname: str = "localhost") -> tuple[Path, Path]:
    """Return (key_path, cert_path) for a hostname inside cert_dir."""
    return cert_dir / f"{hostname}-key.pem", cert_dir / f"{hostname}.pem"


def update_gitignore(cert_dir: str, base_dir: Path | None = None) -> bool:
    """Append cert_dir to .gitignore unless it is already mentioned.

    Matching is a plain substring check on the file contents.

    Args:
        cert_dir: Certificate directory as given by the caller
        base_dir: Directory holding .gitignore. Defaults to cwd.

    Returns:
        True if the file was modified
    """
    if base_dir is None:
        base_dir = Path.cwd()
    gitignore_path = base_dir / ".gitignore"

    if not gitignore_path.exists():
        return False

    if cert_dir in gitignore_path.read_text(encoding="utf-8"):
        return False

    console.print("[dim]Adding certificates to .gitignore[/dim]")
    with gitignore_path.open("a", encoding="utf-8") as f:
        f.write(f"\n{cert_dir}")
    return True


def _obtain_binary(provisioner: BinaryProvisioner) -> Path:
    try:
        return provisioner.ensure_binary()
    except DevcertError as e:
        console.print(f"[red]Error downloading mkcert:[/red] {escape(str(e))}")
        raise BinaryMissing(f"missing mkcert binary ({e.message})") from e


def _generate(
    cert_dir: str,
    hostname: str,
    base_dir: Path,
    provisioner: BinaryProvisioner,
    tool_factory: Callable[[Path], CertTool],
) -> CertificateResult:
    binary_path = _obtain_binary(provisioner)

    resolved_cert_dir = (base_dir / cert_dir).resolve()
    try:
        resolved_cert_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DevcertError(
            f"Failed to create certificate directory {resolved_cert_dir}: {e}",
            code="CERT_DIR_FAILED",
        ) from e

    key_path, cert_path = certificate_paths(resolved_cert_dir, hostname)
    tool = tool_factory(binary_path)

    console.print("Attempting to generate self signed certificate. This may prompt for your password.")

    returncode = tool.install_ca_and_emit_cert(key_path, cert_path, hostname)
    if returncode != 0:
        raise ProcessInvocationFailed(f"mkcert -install exited with status {returncode}")

    ca_root = tool.query_ca_root()

    if not key_path.exists() or not cert_path.exists():
        raise CertificateFilesNotProduced(
            f"Failed to generate self-signed certificate: expected {key_path} and {cert_path}"
        )

    console.print(f"[green]CA Root certificate created in[/green] {escape(ca_root)}")
    console.print(f"[green]Certificates created in[/green] {escape(str(resolved_cert_dir))}")

    return CertificateResult(
        status="success",
        key_path=key_path,
        cert_path=cert_path,
        ca_root=ca_root,
    )


def create_self_signed_certificate(
    cert_dir: str = "certificates",
    *,
    config: DevcertConfig | None = None,
    provisioner: BinaryProvisioner | None = None,
    base_dir: Path | None = None,
    tool_factory: Callable[[Path], CertTool] = MkcertTool,
) -> CertificateResult:
    """Generate a locally-trusted certificate for development.

    Provisions mkcert, installs its root CA, and writes
    ``<cert_dir>/<hostname>-key.pem`` and ``<cert_dir>/<hostname>.pem``.
    Failures are reported through the result instead of being raised so the
    caller can fall back to plain HTTP.

    Args:
        cert_dir: Output directory, relative to base_dir
        config: Tool version, hostname and cache settings
        provisioner: Binary provisioner. Built from config when None.
        base_dir: Working directory for cert_dir and .gitignore. Defaults to cwd.
        tool_factory: Builds the CertTool for a binary path

    Returns:
        CertificateResult with key/cert paths on success, the error otherwise
    """
    if config is None:
        config = DevcertConfig()
    if base_dir is None:
        base_dir = Path.cwd()
    if provisioner is None:
        cache_root = config.cache_root if config.cache_root is not None else default_cache_root()
        provisioner = BinaryProvisioner.from_config(config, cache_root)

    try:
        result = _generate(cert_dir, config.hostname, base_dir, provisioner, tool_factory)
    except DevcertError as e:
        console.print(
            f"[red]Failed to generate self-signed certificate ({e.code}).[/red] {escape(e.message)}"
        )
        return CertificateResult(status="failed", error=e)

    try:
        update_gitignore(cert_dir, base_dir)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[yellow]Could not update .gitignore: {escape(str(e))}[/yellow]")

    return result
