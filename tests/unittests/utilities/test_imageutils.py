import numpy as np
import pytest
import SimpleITK as sitk

from imgmaker.builder import ImageBuilder
from imgmaker.coretypes import REPRESENTATION_TABLE, ScalarType
from imgmaker.utils.imageutils import array_to_image, synthetic_to_sitk


@pytest.mark.parametrize(
    "array, origin, direction, spacing",
    [
        (
            np.zeros((10, 10, 10)),
            (0.0, 0.0, 0.0),
            (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0),
            (1.0, 1.0, 1.0),
        ),
        (
            np.ones((5, 6)),
            (1.0, 1.0),
            (0.0, 1.0, 1.0, 0.0),
            (0.5, 0.5),
        ),
    ],
)
def test_array_to_image(array, origin, direction, spacing) -> None:
    image = array_to_image(array, origin, direction, spacing)
    assert isinstance(image, sitk.Image)
    assert image.GetOrigin() == origin
    assert image.GetDirection() == direction
    assert image.GetSpacing() == spacing
    assert image.GetSize() == tuple(reversed(array.shape))


@pytest.mark.parametrize("scalar_type", list(ScalarType))
@pytest.mark.parametrize("is_vector", [False, True])
def test_synthetic_to_sitk_pixel_type(make_parameters, scalar_type, is_vector) -> None:
    params = make_parameters(
        dimension=2,
        size=(3, 2),
        scalar_type=scalar_type.value,
        number_of_components=3 if is_vector else 1,
    )
    rep = REPRESENTATION_TABLE[(2, scalar_type, is_vector)]
    sitk_image = synthetic_to_sitk(ImageBuilder(rep).build(params))
    assert sitk_image.GetPixelID() == rep.sitk_pixel_id
    assert sitk_image.GetSize() == (3, 2)
    assert sitk_image.GetNumberOfComponentsPerPixel() == (3 if is_vector else 1)
