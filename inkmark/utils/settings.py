"""
User-adjustable export settings stored as JSON in the config directory.
"""
import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

from .resource_loader import get_config_dir, get_download_dir

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"


@dataclass
class ExportSettings:
    """Appearance and output options for annotated exports."""
    highlight_opacity: float = 0.35
    base_font_size: float = 12.0
    default_stroke_width: float = 2.0
    default_color: str = "#FFFF00"
    output_filename: str = "annotated-document.pdf"
    fetch_timeout: float = 30.0
    target_page: int = 1  # 1-based
    output_dir: str = field(default_factory=lambda: str(get_download_dir()))

    @classmethod
    def from_dict(cls, data: dict) -> "ExportSettings":
        """Build settings from a dict, ignoring unknown keys and mistyped values."""
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.type is float and isinstance(value, int) and not isinstance(value, bool):
                value = float(value)
            if isinstance(value, bool) or not isinstance(value, f.type):
                logger.warning("Ignoring setting %s=%r: expected %s", f.name, value, f.type.__name__)
                continue
            values[f.name] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def load(cls, file_path: Optional[Union[str, Path]] = None) -> "ExportSettings":
        """
        Load settings from JSON.

        Args:
            file_path: Optional custom path; defaults to the config directory

        Returns:
            Loaded settings, or defaults if the file is missing or invalid
        """
        path = Path(file_path) if file_path else get_config_dir() / SETTINGS_FILENAME
        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = json.load(f)
            return cls.from_dict(data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Ignoring settings file %s: %s", path, e)
            return cls()

    def save(self, file_path: Optional[Union[str, Path]] = None) -> bool:
        """
        Save settings to JSON.

        Returns:
            True if save was successful
        """
        path = Path(file_path) if file_path else get_config_dir() / SETTINGS_FILENAME
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error("Failed to save settings to %s: %s", path, e)
            return False
