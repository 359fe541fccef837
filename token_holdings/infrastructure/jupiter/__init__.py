"""Jupiter Ultra API client."""

from .client import JupiterTokenClient

__all__ = ["JupiterTokenClient"]
