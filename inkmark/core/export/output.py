import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class OutputWriter:
    """Saves exported bytes into the download directory."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def save(self, data: bytes, filename: str) -> Optional[Path]:
        """
        Write the file through a temporary file in the same directory.

        Args:
            data: File contents
            filename: Suggested file name

        Returns:
            Path of the saved file, or None if it could not be written
        """
        target = self.output_dir / filename
        temp_path = None
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(suffix='.pdf', dir=self.output_dir)
            with os.fdopen(temp_fd, 'wb') as f:
                f.write(data)
            shutil.move(temp_path, target)
        except OSError as e:
            logger.error("Failed to save %s: %s", target, e)
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            return None

        logger.info("Saved %s (%d bytes)", target, len(data))
        return target
