"""
Utility functions and helpers.
"""
from .resource_loader import get_config_dir, get_download_dir
from .settings import ExportSettings

__all__ = [
    'ExportSettings',
    'get_config_dir',
    'get_download_dir',
]
