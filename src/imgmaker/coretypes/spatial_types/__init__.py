from .direction import Direction
from .image_geometry import ImageGeometry

__all__ = ["Direction", "ImageGeometry"]
