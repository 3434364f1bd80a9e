from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from imgmaker.coretypes.pixel_types import SUPPORTED_DIMENSIONS
from imgmaker.coretypes.spatial_types import Direction, ImageGeometry
from imgmaker.exceptions import ConfigurationError, UnsupportedDimensionError

__all__ = ["ParameterSet"]


class ParameterSet(BaseModel):
    """
    Everything needed to synthesize and write one image.

    `spacing`, `origin` and `direction` default to unit spacing, a zero
    origin and the identity matrix of the requested dimension. Vector
    lengths must match `dimension` exactly.

    `scalar_type` is kept as the raw tag; deciding whether it names a
    supported kind is left to the type resolver.

    Examples
    --------
    >>> params = ParameterSet(
    ...     dimension=2,
    ...     scalar_type="float",
    ...     size=(64, 32),
    ...     fill_values=(1.5,),
    ...     output_path="blank.mha",
    ... )
    >>> params.spacing
    (1.0, 1.0)
    """

    model_config = ConfigDict(frozen=True)

    dimension: int = Field(
        default=3,
        description="Number of spatial axes (1, 2 or 3).",
        title="Dimension",
    )
    number_of_components: int = Field(
        default=1,
        ge=1,
        description="Components per pixel. More than one produces a vector image.",
        title="Number of Components",
    )
    scalar_type: str = Field(
        default="uchar",
        description="Component type tag: uchar, char, ushort, short, uint, int, ulong, long, float or double.",
        title="Scalar Type",
    )
    size: Tuple[int, ...] = Field(
        description="Number of pixels along each axis, x first.",
        title="Size",
        examples=[(10, 10, 10)],
    )
    spacing: Tuple[float, ...] = Field(
        description="Physical distance between neighbouring pixels along each axis.",
        title="Spacing",
    )
    origin: Tuple[float, ...] = Field(
        description="Physical position of the pixel at index zero.",
        title="Origin",
    )
    direction: Tuple[float, ...] = Field(
        description="Orientation matrix flattened in row-major order.",
        title="Direction",
    )
    fill_values: Tuple[float, ...] = Field(
        default=(0.0,),
        min_length=1,
        description="Component values, reused cyclically when there are more components than values.",
        title="Fill Values",
    )
    output_path: Path = Field(
        description="Destination file. The extension picks the file format.",
        title="Output Path",
        examples=["blank.nrrd", "volume.nii.gz"],
    )

    @model_validator(mode="before")
    @classmethod
    def _default_geometry(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        try:
            dim = int(data.get("dimension", 3))
        except (TypeError, ValueError):
            return data
        if dim not in SUPPORTED_DIMENSIONS:
            # reported by _check_dimension
            return data
        if data.get("spacing") is None:
            data["spacing"] = (1.0,) * dim
        if data.get("origin") is None:
            data["origin"] = (0.0,) * dim
        if data.get("direction") is None:
            data["direction"] = tuple(Direction.identity(dim))
        return data

    @field_validator("dimension")
    @classmethod
    def _check_dimension(cls, value: int) -> int:
        if value not in SUPPORTED_DIMENSIONS:
            msg = f"dimension must be one of {SUPPORTED_DIMENSIONS}, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if any(v < 0 for v in value):
            msg = f"size entries must be non-negative, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("spacing")
    @classmethod
    def _check_spacing(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        if any(v <= 0 for v in value):
            msg = f"spacing entries must be positive, got {value}"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _check_lengths(self) -> ParameterSet:
        dim = self.dimension
        expected = {
            "size": dim,
            "spacing": dim,
            "origin": dim,
            "direction": dim * dim,
        }
        for name, length in expected.items():
            got = len(getattr(self, name))
            if got != length:
                msg = (
                    f"{name} needs {length} values for a {dim}-D image, "
                    f"got {got}"
                )
                raise ValueError(msg)
        return self

    @classmethod
    def from_options(cls, **options: Any) -> ParameterSet:
        """
        Validate raw options, translating validation failures.

        Raises
        ------
        UnsupportedDimensionError
            If `dimension` is not 1, 2 or 3.
        ConfigurationError
            If the options do not describe a valid image otherwise.
        """
        try:
            return cls(**options)
        except ValidationError as e:
            if any(err["loc"] == ("dimension",) for err in e.errors()):
                raise UnsupportedDimensionError(str(e)) from e
            raise ConfigurationError(str(e)) from e

    @property
    def geometry(self) -> ImageGeometry:
        return ImageGeometry(
            size=self.size,
            spacing=self.spacing,
            origin=self.origin,
            direction=Direction(self.direction),
        )

    @property
    def is_vector(self) -> bool:
        return self.number_of_components > 1
