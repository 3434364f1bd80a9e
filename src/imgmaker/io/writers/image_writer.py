from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from imgmaker.coretypes import SyntheticImage
from imgmaker.exceptions import EncodeError
from imgmaker.io.writers.codecs import ImageCodec, default_codecs
from imgmaker.io.writers.progress import WriterProgressWatcher
from imgmaker.loggers import logger, tqdm_logging_redirect


class ExistingFileMode(str, Enum):
    """
    Enum to specify handling behavior for existing files.

    Attributes
    ----------
    OVERWRITE: str
        Replace the existing file. Logs as debug and continues.
    SKIP: str
        Leave the existing file alone and report success without writing.
    FAIL: str
        Report an `EncodeError` without touching the file.
    """

    OVERWRITE = "overwrite"
    SKIP = "skip"
    FAIL = "fail"


@dataclass(frozen=True)
class WriteOutcome:
    """What happened when an image was handed to `ImageFileWriter.encode`.

    Attributes
    ----------
    path : Path
        Destination that was requested.
    error : EncodeError, optional
        The failure, or None if the write succeeded.
    skipped : bool
        True when the file already existed and SKIP mode left it in place.
    """

    path: Path
    error: Optional[EncodeError] = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ImageFileWriter:
    """
    Persist a `SyntheticImage` to a path with the first codec that accepts it.

    `encode` is the boundary between the image maker and its image
    libraries: it never raises, every library or filesystem failure comes
    back as the `error` of the returned `WriteOutcome`.

    Attributes
    ----------
    existing_file_mode : ExistingFileMode, default=ExistingFileMode.OVERWRITE
        Behavior when the destination already exists.
    create_dirs : bool, default=True
        Create missing parent directories of the destination.
    show_progress : bool, default=True
        Show a "Write Volume" progress bar while writing.
    codecs : list[ImageCodec]
        Candidate codecs, tried in order.
    """

    existing_file_mode: ExistingFileMode = field(
        default=ExistingFileMode.OVERWRITE
    )
    create_dirs: bool = field(default=True)
    show_progress: bool = field(default=True)
    codecs: list[ImageCodec] = field(default_factory=default_codecs)

    def __post_init__(self) -> None:
        match self.existing_file_mode:
            case ExistingFileMode():
                pass
            case str():
                try:
                    self.existing_file_mode = ExistingFileMode(
                        self.existing_file_mode.lower()
                    )
                except ValueError as e:
                    errmsg = (
                        f"Invalid existing_file_mode {self.existing_file_mode}. "
                        "Must be one of 'overwrite', 'skip', or 'fail'."
                    )
                    raise ValueError(errmsg) from e
            case _:
                errmsg = (
                    f"Invalid existing_file_mode {self.existing_file_mode}. "
                    "Must be one of 'overwrite', 'skip', or 'fail'."
                )
                raise ValueError(errmsg)

    def select_codec(self, image: SyntheticImage) -> ImageCodec:
        for codec in self.codecs:
            if codec.supports(image):
                return codec
        msg = f"No codec can write a {image.dimension}-D image."
        raise EncodeError(msg)

    def resolve_path(self, path: Path) -> Optional[Path]:
        """
        Prepare `path` for writing.

        Returns
        -------
        Path | None
            The path to write to, or None if SKIP mode found an existing
            file.

        Raises
        ------
        FileExistsError
            If the file exists and the mode is FAIL.
        FileNotFoundError
            If the parent directory is missing and `create_dirs` is False.
        """
        if path.exists():
            match self.existing_file_mode:
                case ExistingFileMode.SKIP:
                    logger.debug("File exists, skipping.", out_path=path)
                    return None
                case ExistingFileMode.FAIL:
                    msg = f"File {path} already exists."
                    raise FileExistsError(msg)
                case ExistingFileMode.OVERWRITE:
                    logger.debug(f"Deleting existing {path} and overwriting.")
                    path.unlink()
        if self.create_dirs:
            path.parent.mkdir(parents=True, exist_ok=True)
        elif not path.parent.exists():
            msg = f"Directory {path.parent} does not exist."
            raise FileNotFoundError(msg)
        return path

    def encode(self, image: SyntheticImage, path: str | Path) -> WriteOutcome:
        """Write `image` to `path` and report the outcome."""
        path = Path(path)
        try:
            out_path = self.resolve_path(path)
        except OSError as e:
            return self._failed(path, str(e), e)

        if out_path is None:
            return WriteOutcome(path=path, skipped=True)

        try:
            codec = self.select_codec(image)
        except EncodeError as e:
            return self._failed(path, str(e), e)

        logger.info(
            "Writing image",
            out_path=out_path,
            representation=str(image.representation),
            codec=codec.name,
        )
        watcher = WriterProgressWatcher(disable=not self.show_progress)
        try:
            with tqdm_logging_redirect():
                codec.write(image, out_path, watcher)
        except Exception as e:  # library errors of any type end here
            msg = f"Error writing image to file {out_path}: {e}"
            return self._failed(path, msg, e)
        finally:
            watcher.close()

        return WriteOutcome(path=out_path)

    def _failed(self, path: Path, message: str, cause: BaseException) -> WriteOutcome:
        error = EncodeError(message, path=path)
        error.__cause__ = cause
        logger.error(message, out_path=path, error_type=type(cause).__name__)
        return WriteOutcome(path=path, error=error)
