"""
pixel_types.py: the closed set of pixel representations an image can take.

A pixel representation is the combination of

1. **Spatial dimension** - 1, 2 or 3.
2. **Scalar kind** - the numeric type of one pixel component, named by the
   ITK component-type tags (``uchar``, ``char``, ``ushort``, ``short``,
   ``uint``, ``int``, ``ulong``, ``long``, ``float``, ``double``).
3. **Scalar or vector pixel** - one component per location, or several.

`REPRESENTATION_TABLE` enumerates every combination up front. Each entry
only differs in its parameters; the code that consumes it never branches on
a particular scalar kind.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

import numpy as np
import SimpleITK as sitk

from imgmaker.exceptions import UnsupportedScalarTypeError

SUPPORTED_DIMENSIONS: Tuple[int, ...] = (1, 2, 3)


class ScalarType(str, Enum):
    """Scalar kinds, valued by their textual tag."""

    UCHAR = "uchar"
    CHAR = "char"
    USHORT = "ushort"
    SHORT = "short"
    UINT = "uint"
    INT = "int"
    ULONG = "ulong"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"

    @classmethod
    def from_tag(cls, tag: str) -> ScalarType:
        """
        Look up a scalar kind by its exact tag.

        Raises
        ------
        UnsupportedScalarTypeError
            If `tag` is not one of the ten supported tags.
        """
        try:
            return cls(tag)
        except ValueError as e:
            raise UnsupportedScalarTypeError(str(tag)) from e

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_SCALAR_DTYPES[self])

    @property
    def sitk_pixel_id(self) -> int:
        return _SITK_PIXEL_IDS[self][0]

    @property
    def sitk_vector_pixel_id(self) -> int:
        return _SITK_PIXEL_IDS[self][1]


# ulong/long follow LP64, i.e. 64 bits wide
_SCALAR_DTYPES: Dict[ScalarType, type] = {
    ScalarType.UCHAR: np.uint8,
    ScalarType.CHAR: np.int8,
    ScalarType.USHORT: np.uint16,
    ScalarType.SHORT: np.int16,
    ScalarType.UINT: np.uint32,
    ScalarType.INT: np.int32,
    ScalarType.ULONG: np.uint64,
    ScalarType.LONG: np.int64,
    ScalarType.FLOAT: np.float32,
    ScalarType.DOUBLE: np.float64,
}

_SITK_PIXEL_IDS: Dict[ScalarType, Tuple[int, int]] = {
    ScalarType.UCHAR: (sitk.sitkUInt8, sitk.sitkVectorUInt8),
    ScalarType.CHAR: (sitk.sitkInt8, sitk.sitkVectorInt8),
    ScalarType.USHORT: (sitk.sitkUInt16, sitk.sitkVectorUInt16),
    ScalarType.SHORT: (sitk.sitkInt16, sitk.sitkVectorInt16),
    ScalarType.UINT: (sitk.sitkUInt32, sitk.sitkVectorUInt32),
    ScalarType.INT: (sitk.sitkInt32, sitk.sitkVectorInt32),
    ScalarType.ULONG: (sitk.sitkUInt64, sitk.sitkVectorUInt64),
    ScalarType.LONG: (sitk.sitkInt64, sitk.sitkVectorInt64),
    ScalarType.FLOAT: (sitk.sitkFloat32, sitk.sitkVectorFloat32),
    ScalarType.DOUBLE: (sitk.sitkFloat64, sitk.sitkVectorFloat64),
}


@dataclass(frozen=True)
class PixelRepresentation:
    """One (dimension, scalar kind, scalar/vector) combination.

    Attributes
    ----------
    dimension : int
        Number of spatial axes.
    scalar_type : ScalarType
        Kind of each pixel component.
    is_vector : bool
        True for multi-component pixels. A single-component request always
        maps to a scalar representation, never to a one-component vector.
    """

    dimension: int
    scalar_type: ScalarType
    is_vector: bool

    @property
    def dtype(self) -> np.dtype:
        return self.scalar_type.dtype

    @property
    def sitk_pixel_id(self) -> int:
        if self.is_vector:
            return self.scalar_type.sitk_vector_pixel_id
        return self.scalar_type.sitk_pixel_id

    @property
    def sitk_pixel_name(self) -> str:
        return sitk.GetPixelIDValueAsString(self.sitk_pixel_id)

    @property
    def key(self) -> Tuple[int, ScalarType, bool]:
        return (self.dimension, self.scalar_type, self.is_vector)

    def __str__(self) -> str:
        kind = "VectorImage" if self.is_vector else "Image"
        return f"{kind}<{self.scalar_type.value}, {self.dimension}>"


REPRESENTATION_TABLE: Dict[Tuple[int, ScalarType, bool], PixelRepresentation] = {
    (dimension, scalar_type, is_vector): PixelRepresentation(
        dimension, scalar_type, is_vector
    )
    for dimension, scalar_type, is_vector in itertools.product(
        SUPPORTED_DIMENSIONS, ScalarType, (False, True)
    )
}
