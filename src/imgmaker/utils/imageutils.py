from typing import Sequence

import numpy as np
import SimpleITK as sitk

from imgmaker.coretypes import SyntheticImage


def array_to_image(
    array: np.ndarray,
    origin: Sequence[float],
    direction: Sequence[float],
    spacing: Sequence[float],
    is_vector: bool = False,
) -> sitk.Image:
    """Convert a numpy array to a SimpleITK image with the given metadata.

    Parameters
    ----------
    array : np.ndarray
        Pixel data, slowest axis first. With `is_vector`, the last axis
        holds the components.
    origin : Sequence[float]
        Physical position of index zero.
    direction : Sequence[float]
        Flattened row-major direction cosines.
    spacing : Sequence[float]
        Pixel spacing along each axis.
    is_vector : bool, optional
        Interpret the last axis as pixel components.

    Returns
    -------
    sitk.Image
        The resulting SimpleITK image.
    """
    image = sitk.GetImageFromArray(array, isVector=is_vector)
    image.SetOrigin(tuple(origin))
    image.SetDirection(tuple(direction))
    image.SetSpacing(tuple(spacing))
    return image


def synthetic_to_sitk(image: SyntheticImage) -> sitk.Image:
    """Wrap a `SyntheticImage` as a SimpleITK image of the same pixel type.

    Raises
    ------
    ValueError
        If SimpleITK picked a different pixel type than the image's
        representation asks for.
    """
    geometry = image.geometry
    sitk_image = array_to_image(
        image.array,
        origin=geometry.origin,
        direction=tuple(geometry.direction),
        spacing=geometry.spacing,
        is_vector=image.representation.is_vector,
    )
    expected = image.representation.sitk_pixel_id
    if sitk_image.GetPixelID() != expected:
        msg = (
            f"SimpleITK created a {sitk_image.GetPixelIDTypeAsString()} image "
            f"instead of {sitk.GetPixelIDValueAsString(expected)}."
        )
        raise ValueError(msg)
    return sitk_image
