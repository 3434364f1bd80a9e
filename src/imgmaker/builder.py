from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from imgmaker.coretypes import (
    ParameterSet,
    PixelRepresentation,
    SyntheticImage,
)
from imgmaker.exceptions import ImageAllocationError, ImageBuildError
from imgmaker.loggers import logger

__all__ = ["ImageBuilder", "build_image"]


@dataclass(frozen=True)
class ImageBuilder:
    """Allocate and fill images of one pixel representation.

    Every representation goes through the same code path; only the dtype
    and component layout vary.

    Attributes
    ----------
    representation : PixelRepresentation
        The representation produced by the resolver.

    Examples
    --------
    >>> builder = ImageBuilder(REPRESENTATION_TABLE[(2, ScalarType.UCHAR, True)])
    >>> builder.canonical_pixel([10, 20], number_of_components=3)
    array([10, 20, 10], dtype=uint8)
    """

    representation: PixelRepresentation

    def components_per_pixel(self, number_of_components: int) -> int:
        return number_of_components if self.representation.is_vector else 1

    def canonical_pixel(
        self,
        fill_values: Sequence[float],
        number_of_components: int,
    ) -> np.ndarray:
        """
        The single pixel value replicated over the whole image.

        Component ``c`` takes ``fill_values[c % len(fill_values)]``, cast to
        the representation's dtype with C-style truncation/wrap-around and
        no range check.
        """
        if not fill_values:
            raise ImageBuildError("At least one fill value is required.")
        components = self.components_per_pixel(number_of_components)
        raw = np.asarray(
            [fill_values[c % len(fill_values)] for c in range(components)],
            dtype=np.float64,
        )
        # out-of-range and non-finite values convert without complaint
        with np.errstate(invalid="ignore", over="ignore"):
            return raw.astype(self.representation.dtype)

    def build(self, parameters: ParameterSet) -> SyntheticImage:
        """
        Allocate the region described by `parameters`, attach its geometry
        and fill every pixel with the canonical pixel value.

        Raises
        ------
        ImageBuildError
            If `parameters` disagree with the representation.
        ImageAllocationError
            If the buffer cannot be allocated.
        """
        rep = self.representation
        if parameters.dimension != rep.dimension:
            msg = (
                f"Parameters describe a {parameters.dimension}-D image but "
                f"the builder is for {rep}."
            )
            raise ImageBuildError(msg)

        geometry = parameters.geometry
        if not geometry.direction.is_normalized():
            logger.debug(
                "Direction rows are not unit length; keeping them as given.",
                direction=repr(geometry.direction),
            )

        components = self.components_per_pixel(parameters.number_of_components)
        shape = geometry.array_shape
        if rep.is_vector:
            shape = (*shape, components)

        pixel = self.canonical_pixel(
            parameters.fill_values, parameters.number_of_components
        )

        logger.debug(
            "Allocating image",
            representation=str(rep),
            size=geometry.size,
            components=components,
        )
        try:
            array = np.empty(shape, dtype=rep.dtype)
        except (MemoryError, ValueError) as e:
            msg = (
                f"Could not allocate {components} x {geometry.size} "
                f"{rep.scalar_type.value} buffer: {e}"
            )
            raise ImageAllocationError(msg) from e

        # broadcasting the one pixel over the spatial axes gives a flat image
        array[...] = pixel if rep.is_vector else pixel[0]

        return SyntheticImage(array, geometry, rep)


def build_image(
    representation: PixelRepresentation, parameters: ParameterSet
) -> SyntheticImage:
    """Handler form of `ImageBuilder.build`, suitable for `resolver.dispatch`."""
    return ImageBuilder(representation).build(parameters)
