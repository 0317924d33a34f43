"""
Error types raised by the capture, projection and export layers.
"""


class InkmarkError(Exception):
    """Base class for all Inkmark errors."""


class FetchFailure(InkmarkError):
    """The original document bytes could not be retrieved."""


class ParseFailure(InkmarkError):
    """The original bytes are not a readable PDF document."""


class InvalidGeometry(InkmarkError):
    """Viewport or page dimensions make a projection undefined."""


class SerializeFailure(InkmarkError):
    """The modified document could not be re-encoded."""
