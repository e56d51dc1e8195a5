"""Tests for module imports to ensure all components are accessible."""


class TestCLIImports:
    """Test CLI module imports."""

    def test_cli_app_import(self):
        """Test CLI app can be imported."""
        from devcert.cli import app

        assert app is not None

    def test_cli_console_import(self):
        """Test CLI console can be imported."""
        from devcert.cli import console

        assert console is not None


class TestTLSImports:
    """Test tls package exports."""

    def test_create_self_signed_certificate_import(self):
        """Test create_self_signed_certificate can be imported."""
        from devcert.tls import create_self_signed_certificate

        assert callable(create_self_signed_certificate)

    def test_provisioner_import(self):
        """Test BinaryProvisioner can be imported."""
        from devcert.tls import BinaryProvisioner

        assert hasattr(BinaryProvisioner, "ensure_binary")

    def test_mkcert_tool_import(self):
        """Test MkcertTool can be imported."""
        from devcert.tls import MkcertTool

        assert hasattr(MkcertTool, "install_ca_and_emit_cert")
        assert hasattr(MkcertTool, "query_ca_root")


class TestModelImports:
    """Test model module imports."""

    def test_config_import(self):
        """Test DevcertConfig can be imported."""
        from devcert.model import DevcertConfig

        assert DevcertConfig is not None

    def test_errors_share_base(self):
        """Test every error type derives from DevcertError."""
        from devcert.model import (
            BinaryMissing,
            CertificateFilesNotProduced,
            ConfigError,
            DevcertError,
            DownloadFailed,
            ProcessInvocationFailed,
            UnsupportedPlatform,
        )

        for error_type in (
            BinaryMissing,
            CertificateFilesNotProduced,
            ConfigError,
            DownloadFailed,
            ProcessInvocationFailed,
            UnsupportedPlatform,
        ):
            assert issubclass(error_type, DevcertError)


class TestVersionImport:
    """Test version import."""

    def test_version_import(self):
        """Test __version__ can be imported."""
        from devcert import __version__

        assert isinstance(__version__, str)
        assert len(__version__) > 0
