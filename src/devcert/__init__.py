"""devcert - locally-trusted development certificates via mkcert."""

__version__ = "0.1.0"
