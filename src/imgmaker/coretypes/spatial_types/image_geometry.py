from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from imgmaker.coretypes.spatial_types.direction import Direction


@dataclass(frozen=True)
class ImageGeometry:
    """Index extent and physical metadata of an N-D image.

    Sequences are in ITK axis order (x first). The region always starts at
    index zero, whatever the physical origin.
    """

    size: Tuple[int, ...]
    spacing: Tuple[float, ...]
    origin: Tuple[float, ...]
    direction: Direction

    def __post_init__(self) -> None:
        dim = len(self.size)
        for name in ("spacing", "origin"):
            if len(getattr(self, name)) != dim:
                msg = (
                    f"{name} has {len(getattr(self, name))} values but the "
                    f"geometry is {dim}-D."
                )
                raise ValueError(msg)
        if self.direction.dimension != dim:
            msg = (
                f"direction is {self.direction.dimension}x"
                f"{self.direction.dimension} but the geometry is {dim}-D."
            )
            raise ValueError(msg)

    @property
    def dimension(self) -> int:
        return len(self.size)

    @property
    def index(self) -> Tuple[int, ...]:
        """Start index of the buffered region."""
        return (0,) * self.dimension

    @property
    def number_of_pixels(self) -> int:
        return math.prod(self.size)

    @property
    def array_shape(self) -> Tuple[int, ...]:
        """Spatial shape of the matching numpy array (slowest axis first)."""
        return tuple(reversed(self.size))
