import numpy as np
import pytest
import SimpleITK as sitk

from imgmaker.coretypes.pixel_types import (
    REPRESENTATION_TABLE,
    SUPPORTED_DIMENSIONS,
    PixelRepresentation,
    ScalarType,
)
from imgmaker.exceptions import ConfigurationError, UnsupportedScalarTypeError

EXPECTED = {
    "uchar": (np.uint8, sitk.sitkUInt8, sitk.sitkVectorUInt8),
    "char": (np.int8, sitk.sitkInt8, sitk.sitkVectorInt8),
    "ushort": (np.uint16, sitk.sitkUInt16, sitk.sitkVectorUInt16),
    "short": (np.int16, sitk.sitkInt16, sitk.sitkVectorInt16),
    "uint": (np.uint32, sitk.sitkUInt32, sitk.sitkVectorUInt32),
    "int": (np.int32, sitk.sitkInt32, sitk.sitkVectorInt32),
    "ulong": (np.uint64, sitk.sitkUInt64, sitk.sitkVectorUInt64),
    "long": (np.int64, sitk.sitkInt64, sitk.sitkVectorInt64),
    "float": (np.float32, sitk.sitkFloat32, sitk.sitkVectorFloat32),
    "double": (np.float64, sitk.sitkFloat64, sitk.sitkVectorFloat64),
}


@pytest.mark.parametrize("tag", list(EXPECTED))
def test_scalar_type_mapping(tag: str) -> None:
    dtype, pixel_id, vector_pixel_id = EXPECTED[tag]
    scalar_type = ScalarType.from_tag(tag)
    assert scalar_type.value == tag
    assert scalar_type.dtype == np.dtype(dtype)
    assert scalar_type.sitk_pixel_id == pixel_id
    assert scalar_type.sitk_vector_pixel_id == vector_pixel_id


@pytest.mark.parametrize("tag", ["bogus", "UCHAR", "unsigned char", "", "float32"])
def test_unknown_tag(tag: str) -> None:
    with pytest.raises(UnsupportedScalarTypeError) as exc_info:
        ScalarType.from_tag(tag)
    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.scalar_type == tag


def test_table_is_complete():
    assert len(REPRESENTATION_TABLE) == len(SUPPORTED_DIMENSIONS) * len(ScalarType) * 2
    for (dimension, scalar_type, is_vector), rep in REPRESENTATION_TABLE.items():
        assert rep.key == (dimension, scalar_type, is_vector)


def test_representation_pixel_id_follows_vectorness():
    scalar = PixelRepresentation(2, ScalarType.SHORT, False)
    vector = PixelRepresentation(2, ScalarType.SHORT, True)
    assert scalar.sitk_pixel_id == sitk.sitkInt16
    assert vector.sitk_pixel_id == sitk.sitkVectorInt16
    assert scalar.dtype == vector.dtype == np.dtype(np.int16)
    assert str(scalar) == "Image<short, 2>"
    assert str(vector) == "VectorImage<short, 2>"
