"""SwitchBot device status CLI package."""

from .auth import build_headers, sign
from .client import SwitchBotClient, call_api
from .config import Credentials, load_credentials
from .errors import (
    APIError,
    ConfigError,
    DecodeError,
    ReadError,
    RequestError,
    ShapeError,
    SwitchBotError,
)
from .models import DeviceStatus

__version__ = "0.1.0"
__all__ = [
    "SwitchBotClient",
    "call_api",
    "build_headers",
    "sign",
    "Credentials",
    "load_credentials",
    "DeviceStatus",
    "SwitchBotError",
    "ConfigError",
    "RequestError",
    "APIError",
    "ReadError",
    "DecodeError",
    "ShapeError",
]
