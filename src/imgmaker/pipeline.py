"""
Resolve, build and write one image.

`make_image` is the entry point of the library. It runs

    ParameterSet -> resolve_representation -> ImageBuilder -> ImageFileWriter

once, synchronously, and reports the outcome as a `PipelineResult` instead
of raising. Only the command line turns that result into an exit status.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from imgmaker.builder import ImageBuilder
from imgmaker.config import WriterOptions
from imgmaker.coretypes import ParameterSet, PixelRepresentation
from imgmaker.exceptions import (
    ImageBuildError,
    ImageMakerError,
    UnsupportedScalarTypeError,
)
from imgmaker.io.writers import ImageFileWriter
from imgmaker.loggers import logger
from imgmaker.resolver import resolve_representation

__all__ = ["PipelineResult", "make_image"]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one `make_image` run.

    Attributes
    ----------
    output_path : Path
        The requested destination.
    representation : PixelRepresentation, optional
        The resolved representation, if resolution got that far.
    error : ImageMakerError, optional
        Why the run failed, or None on success.
    skipped : bool
        The destination already existed and was left untouched.
    """

    output_path: Path
    representation: Optional[PixelRepresentation] = None
    error: Optional[ImageMakerError] = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return EXIT_SUCCESS if self.ok else EXIT_FAILURE


def make_image(
    parameters: ParameterSet,
    writer: ImageFileWriter | WriterOptions | None = None,
) -> PipelineResult:
    """
    Synthesize the image described by `parameters` and write it.

    Parameters
    ----------
    parameters : ParameterSet
        Validated request.
    writer : ImageFileWriter | WriterOptions, optional
        Writer (or options to create one). Defaults to overwriting with a
        progress bar.

    Returns
    -------
    PipelineResult
        Success, or the configuration/allocation/encoding error that
        stopped the run.
    """
    match writer:
        case None:
            writer = ImageFileWriter()
        case WriterOptions():
            writer = writer.create_writer()

    output_path = Path(parameters.output_path)

    representation = resolve_representation(
        parameters.dimension,
        parameters.number_of_components,
        parameters.scalar_type,
    )
    if representation is None:
        return PipelineResult(
            output_path=output_path,
            error=UnsupportedScalarTypeError(parameters.scalar_type),
        )

    try:
        image = ImageBuilder(representation).build(parameters)
    except ImageBuildError as e:
        logger.error(
            "Failed to build image",
            representation=str(representation),
            error=str(e),
        )
        return PipelineResult(
            output_path=output_path,
            representation=representation,
            error=e,
        )

    # the buffer is released when this block exits, written or not
    with image:
        outcome = writer.encode(image, output_path)

    if outcome.ok:
        logger.info(
            "Image written" if not outcome.skipped else "Existing image kept",
            out_path=outcome.path,
            representation=str(representation),
        )
    return PipelineResult(
        output_path=output_path,
        representation=representation,
        error=outcome.error,
        skipped=outcome.skipped,
    )
