"""
Per-platform locations for settings and downloaded files.
"""
import os
import sys
from pathlib import Path

APP_NAME = "Inkmark"


def get_config_dir(app_name: str = APP_NAME) -> Path:
    """
    Get the configuration directory for storing settings.

    Args:
        app_name: Name of the application

    Returns:
        Path to the config directory
    """
    if os.name == 'nt':  # Windows
        base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        config_dir = Path(base_dir) / app_name / "config"
    elif sys.platform == 'darwin':  # macOS
        config_dir = Path.home() / "Library" / "Preferences" / app_name
    else:  # Linux
        base_dir = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        config_dir = Path(base_dir) / app_name

    return config_dir


def get_download_dir() -> Path:
    """Directory exported documents are saved to by default."""
    downloads = Path.home() / "Downloads"
    if downloads.is_dir():
        return downloads
    return Path.home()
