"""Write OpenSSL request configurations and issue self-signed TLS certificates."""

__version__ = "0.1.0"

__all__ = ["__version__"]