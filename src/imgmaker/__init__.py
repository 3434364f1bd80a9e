__version__ = "0.1.0"

from .builder import ImageBuilder, build_image
from .config import ImageMakerSettings, WriterOptions
from .coretypes import (
    REPRESENTATION_TABLE,
    Direction,
    ImageGeometry,
    ParameterSet,
    PixelRepresentation,
    ScalarType,
    SyntheticImage,
)
from .io import ExistingFileMode, ImageFileWriter, WriteOutcome
from .loggers import logger
from .pipeline import PipelineResult, make_image
from .resolver import dispatch, resolve_representation

__all__ = [
    "logger",
    ## coretypes
    "ParameterSet",
    "Direction",
    "ImageGeometry",
    "ScalarType",
    "PixelRepresentation",
    "REPRESENTATION_TABLE",
    "SyntheticImage",
    # stages
    "resolve_representation",
    "dispatch",
    "ImageBuilder",
    "build_image",
    "ImageFileWriter",
    "ExistingFileMode",
    "WriteOutcome",
    # entry point
    "make_image",
    "PipelineResult",
    # config
    "ImageMakerSettings",
    "WriterOptions",
]
