import numpy as np
import pytest

from imgmaker.coretypes import (
    REPRESENTATION_TABLE,
    Direction,
    ImageGeometry,
    ScalarType,
    SyntheticImage,
)
from imgmaker.exceptions import ImageReleasedError


@pytest.fixture
def geometry_2d() -> ImageGeometry:
    return ImageGeometry(
        size=(3, 2),
        spacing=(1.0, 1.0),
        origin=(0.0, 0.0),
        direction=Direction.identity(2),
    )


def test_scalar_image(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.SHORT, False)]
    array = np.arange(6, dtype=np.int16).reshape(2, 3)
    image = SyntheticImage(array, geometry_2d, rep)
    assert image.number_of_components == 1
    assert image.buffer_length == 6
    # index is x first
    assert image.get_pixel((2, 1)).tolist() == [5]
    assert image.get_pixel((1, 0)).tolist() == [1]


def test_vector_image(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.FLOAT, True)]
    array = np.zeros((2, 3, 4), dtype=np.float32)
    image = SyntheticImage(array, geometry_2d, rep)
    assert image.number_of_components == 4
    assert image.buffer_length == 24
    assert image.get_pixel((0, 0)).shape == (4,)


def test_shape_mismatch(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.UCHAR, False)]
    with pytest.raises(ValueError, match="does not match size"):
        SyntheticImage(np.zeros((3, 2), dtype=np.uint8), geometry_2d, rep)


def test_vector_needs_component_axis(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.UCHAR, True)]
    with pytest.raises(ValueError, match="does not match size"):
        SyntheticImage(np.zeros((2, 3), dtype=np.uint8), geometry_2d, rep)


def test_dtype_mismatch(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.UCHAR, False)]
    with pytest.raises(ValueError, match="dtype"):
        SyntheticImage(np.zeros((2, 3), dtype=np.int8), geometry_2d, rep)


def test_context_manager_releases_buffer(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.UCHAR, False)]
    with SyntheticImage(np.zeros((2, 3), dtype=np.uint8), geometry_2d, rep) as image:
        assert not image.released
    assert image.released
    with pytest.raises(ImageReleasedError):
        _ = image.array


def test_release_on_error(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.UCHAR, False)]
    image = SyntheticImage(np.zeros((2, 3), dtype=np.uint8), geometry_2d, rep)
    with pytest.raises(RuntimeError):
        with image:
            raise RuntimeError("boom")
    assert image.released


def test_get_pixel_wrong_dimension(geometry_2d: ImageGeometry) -> None:
    rep = REPRESENTATION_TABLE[(2, ScalarType.UCHAR, False)]
    image = SyntheticImage(np.zeros((2, 3), dtype=np.uint8), geometry_2d, rep)
    with pytest.raises(IndexError):
        image.get_pixel((0, 0, 0))
