"""Service layer for site-deploy"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
