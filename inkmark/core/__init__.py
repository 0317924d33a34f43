"""
Core annotation capture, projection and export logic.
"""
from .annotations import Annotation, AnnotationManager, AnnotationType
from .errors import (
    FetchFailure,
    InkmarkError,
    InvalidGeometry,
    ParseFailure,
    SerializeFailure,
)
from .geometry import Point, hex_to_rgb, normalize_hex_color

__all__ = [
    "Annotation",
    "AnnotationManager",
    "AnnotationType",
    "Point",
    "hex_to_rgb",
    "normalize_hex_color",
    "InkmarkError",
    "FetchFailure",
    "ParseFailure",
    "InvalidGeometry",
    "SerializeFailure",
]
