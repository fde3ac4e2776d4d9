"""
pkg_fedauth.config

- FedAuthSettings: token acquisition settings.
- settings_from_env: build settings from environment variables.
"""

from .env import settings_from_env
from .settings import FedAuthSettings

__all__ = [
    "FedAuthSettings",
    "settings_from_env",
]
