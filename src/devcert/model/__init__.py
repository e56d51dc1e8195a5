"""Data models for devcert."""

from devcert.model.config import DevcertConfig
from devcert.model.validation import (
    BinaryMissing,
    CertificateFilesNotProduced,
    ConfigError,
    DevcertError,
    DownloadFailed,
    ProcessInvocationFailed,
    UnsupportedPlatform,
)

__all__ = [
    "DevcertConfig",
    "DevcertError",
    "UnsupportedPlatform",
    "DownloadFailed",
    "BinaryMissing",
    "CertificateFilesNotProduced",
    "ProcessInvocationFailed",
    "ConfigError",
]
