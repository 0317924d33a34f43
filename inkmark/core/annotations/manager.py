"""
Ordered annotation set for the current editing session.
"""
import logging
from typing import List, Tuple

from .models import Annotation

logger = logging.getLogger(__name__)


class AnnotationManager:
    """
    Holds committed annotations in creation order.

    The set is append-only while editing; the only removal is ``clear_all``.
    Later annotations are drawn on top of earlier ones.
    """

    def __init__(self):
        self._annotations: List[Annotation] = []

    @property
    def annotations(self) -> Tuple[Annotation, ...]:
        return tuple(self._annotations)

    def add_annotation(self, annotation: Annotation) -> None:
        """
        Append a committed annotation.

        Args:
            annotation: Annotation to add
        """
        self._annotations.append(annotation)
        logger.debug("Committed %s annotation on page %d (%d total)",
                     annotation.annotation_type.value, annotation.page,
                     len(self._annotations))

    def clear_all(self) -> None:
        """Remove every annotation."""
        self._annotations.clear()

    def snapshot(self) -> Tuple[Annotation, ...]:
        """
        Get an immutable copy of the sequence for export.

        Records are frozen, so a shallow tuple copy cannot be changed by
        later commits.
        """
        return tuple(self._annotations)

    def get_annotations_for_page(self, page: int) -> List[Annotation]:
        """
        Get all annotations for a specific page.

        Args:
            page: 1-based page index

        Returns:
            List of annotations on the specified page
        """
        return [ann for ann in self._annotations if ann.page == page]

    def get_annotation_count(self) -> int:
        """Get total number of annotations."""
        return len(self._annotations)
