"""
Retrieval of the original document bytes.
"""
import logging
from pathlib import Path
from typing import Union

import requests

from inkmark.core.errors import FetchFailure

logger = logging.getLogger(__name__)

DocumentSource = Union[str, Path, bytes, bytearray]


def fetch_document_bytes(source: DocumentSource, timeout: float = 30) -> bytes:
    """
    Get the raw bytes of the source document.

    Args:
        source: http(s) URL, local file path, or the bytes themselves
        timeout: Network timeout in seconds

    Returns:
        Document bytes

    Raises:
        FetchFailure: If the bytes cannot be retrieved
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)

    location = str(source)
    if location.startswith(("http://", "https://")):
        try:
            response = requests.get(location, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchFailure(f"Could not download {location}: {e}") from e
        logger.debug("Fetched %d bytes from %s", len(response.content), location)
        return response.content

    try:
        return Path(location).read_bytes()
    except OSError as e:
        raise FetchFailure(f"Could not read {location}: {e}") from e
