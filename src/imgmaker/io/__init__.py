from .writers import ExistingFileMode, ImageFileWriter, WriteOutcome

__all__ = ["ExistingFileMode", "ImageFileWriter", "WriteOutcome"]
