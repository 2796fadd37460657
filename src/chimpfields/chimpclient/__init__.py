from .chimpclient import ChimpClient
from .config import ClientConfig

__all__ = ["ChimpClient", "ClientConfig"]
