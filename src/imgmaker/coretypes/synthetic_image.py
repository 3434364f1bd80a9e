from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

import numpy as np

from imgmaker.coretypes.pixel_types import PixelRepresentation
from imgmaker.coretypes.spatial_types import ImageGeometry
from imgmaker.exceptions import ImageReleasedError
from imgmaker.loggers import logger

if TYPE_CHECKING:
    from types import TracebackType


class SyntheticImage:
    """
    An in-memory image: one contiguous pixel buffer plus its geometry.

    The buffer is a numpy array in the layout SimpleITK exchanges with
    numpy: spatial axes reversed (slowest first) and, for vector pixels, a
    trailing component axis.

    Use it as a context manager so the buffer is dropped as soon as the
    caller is done with it, including on error paths.

    Parameters
    ----------
    array : np.ndarray
        Pixel buffer. Its shape must agree with `geometry` and
        `representation`.
    geometry : ImageGeometry
        Size, spacing, origin and direction.
    representation : PixelRepresentation
        The resolved pixel representation the buffer was built for.
    """

    def __init__(
        self,
        array: np.ndarray,
        geometry: ImageGeometry,
        representation: PixelRepresentation,
    ) -> None:
        spatial_shape = (
            array.shape[:-1] if representation.is_vector else array.shape
        )
        if spatial_shape != geometry.array_shape or (
            representation.is_vector and array.ndim != geometry.dimension + 1
        ):
            msg = (
                f"Buffer shape {array.shape} does not match size "
                f"{geometry.size} for {representation}."
            )
            raise ValueError(msg)
        if array.dtype != representation.dtype:
            msg = (
                f"Buffer dtype {array.dtype} does not match "
                f"{representation.dtype} for {representation}."
            )
            raise ValueError(msg)
        self._array: Optional[np.ndarray] = array
        self.geometry = geometry
        self.representation = representation

    @property
    def array(self) -> np.ndarray:
        if self._array is None:
            raise ImageReleasedError("The pixel buffer has been released.")
        return self._array

    @property
    def released(self) -> bool:
        return self._array is None

    @property
    def dimension(self) -> int:
        return self.geometry.dimension

    @property
    def size(self) -> Tuple[int, ...]:
        return self.geometry.size

    @property
    def number_of_components(self) -> int:
        if self.representation.is_vector:
            return int(self.array.shape[-1])
        return 1

    @property
    def buffer_length(self) -> int:
        """Number of scalars in the buffer."""
        return int(self.array.size)

    def get_pixel(self, index: Sequence[int]) -> np.ndarray:
        """Return the components at an ITK-ordered (x first) index."""
        if len(index) != self.dimension:
            msg = f"Index {tuple(index)} is not {self.dimension}-D."
            raise IndexError(msg)
        value = self.array[tuple(reversed(index))]
        return np.atleast_1d(value)

    def release(self) -> None:
        if self._array is not None:
            logger.debug("Releasing pixel buffer", nbytes=self._array.nbytes)
        self._array = None

    def __enter__(self) -> SyntheticImage:
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else "allocated"
        return f"SyntheticImage({self.representation}, size={self.size}, {state})"
