"""
Export pipeline and background worker.
"""
from .export_worker import ExportWorker
from .output import OutputWriter
from .pipeline import export_annotated_pdf

__all__ = ['ExportWorker', 'OutputWriter', 'export_annotated_pdf']
