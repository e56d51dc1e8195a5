"""Configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

MKCERT_VERSION = "v1.4.4"
MKCERT_DOWNLOAD_BASE_URL = "https://github.com/FiloSottile/mkcert/releases/download"


class DevcertConfig(BaseModel):
    """Configuration for certificate provisioning."""

    # Cache root; the mkcert binaries live under <cache_root>/mkcert
    cache_root: Path | None = Field(default=None)

    # Pinned mkcert release
    tool_version: str = Field(default=MKCERT_VERSION, min_length=1)
    download_base_url: str = Field(default=MKCERT_DOWNLOAD_BASE_URL)

    # Output
    cert_dir: str = Field(default="certificates", min_length=1)
    hostname: str = Field(default="localhost", min_length=1)

    @field_validator("download_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Normalize base URL so path segments join cleanly."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"download_base_url must be an http(s) URL: {v}")
        return v.rstrip("/")
