"""Error types and config file loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from devcert.model.config import DevcertConfig


class DevcertError(Exception):
    """Error with error code."""

    code = "DEVCERT_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"{self.code}: {message}")


class UnsupportedPlatform(DevcertError):
    """The running OS has no pre-built mkcert release."""

    code = "UNSUPPORTED_PLATFORM"

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")


class DownloadFailed(DevcertError):
    """Fetching the mkcert release failed."""

    code = "DOWNLOAD_FAILED"

    def __init__(self, url: str, status: int | None, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        detail = f"request failed with status {status}" if status is not None else "request failed"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(f"Failed to download mkcert package from {url} ({detail})")


class BinaryMissing(DevcertError):
    """No runnable mkcert binary could be provisioned."""

    code = "BINARY_MISSING"


class CertificateFilesNotProduced(DevcertError):
    """mkcert ran but the expected PEM files are not on disk."""

    code = "CERT_FILES_NOT_PRODUCED"


class ProcessInvocationFailed(DevcertError):
    """mkcert could not be started or exited with an error."""

    code = "PROCESS_FAILED"


class ConfigError(DevcertError):
    """Configuration file is missing or invalid."""

    code = "CONFIG_INVALID"


def load_config(config_path: Path | None = None) -> DevcertConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file. Defaults are used when None.

    Returns:
        Validated DevcertConfig

    Raises:
        ConfigError: If the file does not exist or does not validate
    """
    if config_path is None:
        return DevcertConfig()

    if not config_path.exists():
        raise ConfigError(f"Config file not found at {config_path}", code="CONFIG_NOT_FOUND")

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")

    try:
        return DevcertConfig(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
