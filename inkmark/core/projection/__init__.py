"""
Viewport geometry and projection into PDF space.
"""
from .projector import FitTransform, fit_scale, project_point
from .viewport import ViewportGeometry

__all__ = ['FitTransform', 'ViewportGeometry', 'fit_scale', 'project_point']
