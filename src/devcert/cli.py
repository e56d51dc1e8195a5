"""CLI entry point for devcert."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from devcert.model.config import DevcertConfig
from devcert.model.validation import DevcertError, load_config

app = typer.Typer(
    name="devcert",
    help="devcert - locally-trusted HTTPS certificates for development",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main_callback(
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Hide mkcert commands being executed"),
    ] = False,
) -> None:
    """devcert - locally-trusted HTTPS certificates for development."""
    from devcert.utils.cmd import set_show_commands

    set_show_commands(not quiet)


console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="YAML configuration file"),
]
CacheDirOption = Annotated[
    Optional[Path],
    typer.Option("--cache-dir", help="Cache root for downloaded binaries"),
]


def _handle_error(error: DevcertError) -> None:
    """Handle devcert errors with rich formatting."""
    console.print(f"[red]Error ({error.code}):[/red] {escape(error.message)}")
    raise typer.Exit(1)


def _load_settings(config: Path | None, cache_dir: Path | None) -> DevcertConfig:
    """Load configuration, applying CLI overrides."""
    try:
        settings = load_config(config)
    except DevcertError as e:
        _handle_error(e)

    if cache_dir is not None:
        settings = settings.model_copy(update={"cache_root": cache_dir})
    return settings


def _build_provisioner(settings: DevcertConfig):
    """Create a provisioner, resolving the default cache root if unset."""
    from devcert.tls.provision import BinaryProvisioner
    from devcert.utils.paths import default_cache_root

    cache_root = settings.cache_root if settings.cache_root is not None else default_cache_root()
    return BinaryProvisioner.from_config(settings, cache_root)


@app.command()
def create(
    cert_dir: Annotated[
        Optional[str],
        typer.Option("--cert-dir", "-d", help="Directory for the generated key and certificate"),
    ] = None,
    cache_dir: CacheDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Create a locally-trusted certificate for localhost.

    Installs the mkcert root CA (this may prompt for your password) and
    writes the key and certificate into the certificate directory.

    [bold]Example:[/bold]
        devcert create --cert-dir certificates
    """
    from devcert.tls.certs import create_self_signed_certificate

    settings = _load_settings(config, cache_dir)
    target_dir = cert_dir if cert_dir is not None else settings.cert_dir

    result = create_self_signed_certificate(target_dir, config=settings)

    if not result.ok:
        console.print("[yellow]Certificate unavailable, falling back to http.[/yellow]")
        _handle_error(result.error)

    table = Table(title="Development certificate")
    table.add_column("Item", style="cyan")
    table.add_column("Path", style="green")
    table.add_row("Key", str(result.key_path))
    table.add_row("Certificate", str(result.cert_path))
    table.add_row("CA Root", result.ca_root or "(unknown)")
    console.print(table)


@app.command()
def binary(
    cache_dir: CacheDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Download mkcert if needed and print its path.

    [bold]Example:[/bold]
        devcert binary --cache-dir /tmp/devcert
    """
    settings = _load_settings(config, cache_dir)

    try:
        binary_path = _build_provisioner(settings).ensure_binary()
    except DevcertError as e:
        _handle_error(e)

    console.print(str(binary_path), highlight=False, soft_wrap=True)


@app.command()
def caroot(
    cache_dir: CacheDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Print the directory holding the mkcert root CA."""
    from devcert.tls.tool import MkcertTool

    settings = _load_settings(config, cache_dir)

    try:
        binary_path = _build_provisioner(settings).ensure_binary()
        ca_root = MkcertTool(binary_path).query_ca_root()
    except DevcertError as e:
        _handle_error(e)

    console.print(ca_root, highlight=False, soft_wrap=True)


@app.command()
def version() -> None:
    """Show version information."""
    from devcert import __version__

    console.print(f"devcert version {__version__}")


if __name__ == "__main__":
    app()
