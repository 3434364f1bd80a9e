from .configuration import (
    DEFAULT_CONFIG_FILENAME,
    ImageMakerSettings,
    WriterOptions,
)

__all__ = ["DEFAULT_CONFIG_FILENAME", "ImageMakerSettings", "WriterOptions"]
