"""
Annotation model for overlay drawings.
"""
from .models import (
    Annotation,
    AnnotationType,
    FreehandAnnotation,
    HighlightAnnotation,
    TextAnnotation,
)
from .manager import AnnotationManager

__all__ = [
    'Annotation',
    'AnnotationType',
    'HighlightAnnotation',
    'FreehandAnnotation',
    'TextAnnotation',
    'AnnotationManager',
]
