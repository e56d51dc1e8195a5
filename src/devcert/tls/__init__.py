"""TLS certificate management."""

from devcert.tls.certs import CertificateResult, create_self_signed_certificate, update_gitignore
from devcert.tls.provision import BinaryProvisioner, detect_target, resolve_binary_identifier
from devcert.tls.tool import CertTool, MkcertTool

__all__ = [
    "BinaryProvisioner",
    "CertTool",
    "CertificateResult",
    "MkcertTool",
    "create_self_signed_certificate",
    "detect_target",
    "resolve_binary_identifier",
    "update_gitignore",
]
