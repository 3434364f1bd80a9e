from .codecs import ImageCodec, Nifti1DCodec, SimpleITKCodec, default_codecs
from .image_writer import ExistingFileMode, ImageFileWriter, WriteOutcome
from .progress import WriterProgressWatcher

__all__ = [
    "ExistingFileMode",
    "ImageFileWriter",
    "WriteOutcome",
    "ImageCodec",
    "SimpleITKCodec",
    "Nifti1DCodec",
    "default_codecs",
    "WriterProgressWatcher",
]
