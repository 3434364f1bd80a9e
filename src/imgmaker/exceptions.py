class ImageMakerError(Exception):
    """Base class for every failure the image maker reports."""

    pass


####################################################################################################
# Configuration


class ConfigurationError(ImageMakerError):
    """Raised when the requested parameters cannot describe an image."""

    pass


class UnsupportedScalarTypeError(ConfigurationError):
    """Raised when a scalar type tag is not one of the supported kinds."""

    def __init__(self, scalar_type: str) -> None:
        self.scalar_type = scalar_type
        super().__init__(f"unknown component type: {scalar_type!r}")


class UnsupportedDimensionError(ConfigurationError):
    """Raised when the image dimension is outside of {1, 2, 3}."""

    pass


####################################################################################################
# Image construction


class ImageBuildError(ImageMakerError):
    pass


class ImageAllocationError(ImageBuildError):
    """Raised when the pixel buffer could not be allocated."""

    pass


class ImageReleasedError(ImageMakerError):
    """Raised when the buffer of a released image is accessed."""

    pass


####################################################################################################
# Encoding


class EncodeError(ImageMakerError):
    """Raised (or returned) when an image could not be written to disk."""

    def __init__(self, message: str, path: object = None) -> None:
        self.path = path
        super().__init__(message)
