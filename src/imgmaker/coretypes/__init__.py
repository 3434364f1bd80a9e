from .parameters import ParameterSet
from .pixel_types import (
    REPRESENTATION_TABLE,
    SUPPORTED_DIMENSIONS,
    PixelRepresentation,
    ScalarType,
)
from .spatial_types import Direction, ImageGeometry
from .synthetic_image import SyntheticImage

__all__ = [
    "ParameterSet",
    "Direction",
    "ImageGeometry",
    # pixel types
    "ScalarType",
    "PixelRepresentation",
    "REPRESENTATION_TABLE",
    "SUPPORTED_DIMENSIONS",
    "SyntheticImage",
]
