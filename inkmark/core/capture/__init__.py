"""
Pointer gesture capture.
"""
from .capture_engine import CaptureEngine, TextRequest
from .tools import ToolMode

__all__ = ['CaptureEngine', 'TextRequest', 'ToolMode']
