"""Run-time selection of a pixel representation.

The resolver turns the three textual/numeric knobs of a request (dimension,
component count, scalar type tag) into one entry of
`REPRESENTATION_TABLE` and hands that entry to the next stage. It performs
no I/O and holds no state.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from imgmaker.coretypes import (
    REPRESENTATION_TABLE,
    SUPPORTED_DIMENSIONS,
    ParameterSet,
    PixelRepresentation,
    ScalarType,
)
from imgmaker.exceptions import UnsupportedScalarTypeError
from imgmaker.loggers import logger

__all__ = ["FALLBACK_DIMENSION", "resolve_representation", "dispatch"]

FALLBACK_DIMENSION = 3

T = TypeVar("T")


def resolve_representation(
    dimension: int,
    number_of_components: int,
    scalar_type: str,
) -> Optional[PixelRepresentation]:
    """
    Select the pixel representation for a request.

    Parameters
    ----------
    dimension : int
        Requested number of spatial axes. Values outside of
        ``SUPPORTED_DIMENSIONS`` fall back to ``FALLBACK_DIMENSION`` with a
        warning; callers that want a hard error must check first (as
        `ParameterSet` does).
    number_of_components : int
        Components per pixel. More than one selects a vector representation.
    scalar_type : str
        Scalar kind tag.

    Returns
    -------
    PixelRepresentation | None
        The matching representation, or None (after logging a diagnostic)
        if `scalar_type` is unknown.
    """
    if dimension not in SUPPORTED_DIMENSIONS:
        logger.warning(
            "Unsupported dimension, falling back to default.",
            dimension=dimension,
            fallback=FALLBACK_DIMENSION,
        )
        dimension = FALLBACK_DIMENSION

    try:
        kind = ScalarType.from_tag(scalar_type)
    except UnsupportedScalarTypeError:
        logger.error(
            "unknown component type",
            scalar_type=scalar_type,
            supported=[s.value for s in ScalarType],
        )
        return None

    representation = REPRESENTATION_TABLE[
        (dimension, kind, number_of_components > 1)
    ]
    logger.debug("Resolved pixel representation", representation=str(representation))
    return representation


def dispatch(
    parameters: ParameterSet,
    handler: Callable[[PixelRepresentation, ParameterSet], T],
) -> Optional[T]:
    """
    Resolve the representation for `parameters` and invoke `handler` with it.

    Returns None without calling `handler` when the scalar type is unknown.
    """
    representation = resolve_representation(
        parameters.dimension,
        parameters.number_of_components,
        parameters.scalar_type,
    )
    if representation is None:
        return None
    return handler(representation, parameters)
