from .client_factory import GcpClient

__all__ = ["GcpClient"]
