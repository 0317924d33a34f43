"""
Controllers connecting the overlay UI to the annotation core.
"""
from .annotation_controller import AnnotationController
from .export_controller import ExportController

__all__ = [
    'AnnotationController',
    'ExportController',
]
