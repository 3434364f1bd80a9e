"""Codecs that turn a `SyntheticImage` into bytes on disk.

Each codec wraps one external library. Library exceptions are allowed to
escape from `write`; `ImageFileWriter.encode` is the single place where they
are translated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

import nibabel as nib
import numpy as np
import SimpleITK as sitk

from imgmaker.coretypes import SyntheticImage
from imgmaker.io.writers.progress import WriterProgressWatcher
from imgmaker.utils import synthetic_to_sitk

# nifti1 intent code ITK uses for multi-component pixels
NIFTI_INTENT_VECTOR = "vector"


class ImageCodec(ABC):
    """Serialize images of the dimensions a library can handle."""

    name: ClassVar[str]

    @abstractmethod
    def supports(self, image: SyntheticImage) -> bool:
        pass

    @abstractmethod
    def write(
        self,
        image: SyntheticImage,
        path: Path,
        watcher: WriterProgressWatcher,
    ) -> None:
        pass


class SimpleITKCodec(ImageCodec):
    """Write 2-D and 3-D images with ``sitk.ImageFileWriter``.

    The file format comes from the extension of `path`, as SimpleITK
    decides it. No compression is requested.
    """

    name = "SimpleITK"

    def supports(self, image: SyntheticImage) -> bool:
        return image.dimension in (2, 3)

    def write(
        self,
        image: SyntheticImage,
        path: Path,
        watcher: WriterProgressWatcher,
    ) -> None:
        sitk_image = synthetic_to_sitk(image)
        writer = sitk.ImageFileWriter()
        writer.SetFileName(path.as_posix())
        watcher.attach(writer)
        writer.Execute(sitk_image)


class Nifti1DCodec(ImageCodec):
    """Write 1-D images as NIfTI-1 with nibabel.

    SimpleITK has no 1-D image type, so this writes the file the way ITK's
    NIfTI writer lays it out: geometry in the affine after the LPS to RAS
    flip, and vector components along the fifth dimension with a
    ``vector`` intent.
    """

    name = "nibabel"

    VALID_EXTENSIONS: ClassVar[list[str]] = [
        ".nii",
        ".nii.gz",
    ]

    def supports(self, image: SyntheticImage) -> bool:
        return image.dimension == 1

    def write(
        self,
        image: SyntheticImage,
        path: Path,
        watcher: WriterProgressWatcher,
    ) -> None:
        if not any(path.name.endswith(ext) for ext in self.VALID_EXTENSIONS):
            msg = (
                f"1-D images can only be written as NIfTI. "
                f"{path.name} must end with one of {self.VALID_EXTENSIONS}."
            )
            raise ValueError(msg)

        geometry = image.geometry
        affine = np.eye(4)
        # LPS -> RAS: the x axis is negated
        affine[0, 0] = -geometry.direction.matrix[0] * geometry.spacing[0]
        affine[0, 3] = -geometry.origin[0]

        data = image.array
        if image.representation.is_vector:
            data = data.reshape(
                (geometry.size[0], 1, 1, 1, image.number_of_components)
            )

        nifti = nib.Nifti1Image(data, affine, dtype=data.dtype)
        nifti.header.set_xyzt_units(xyz="mm")
        nifti.header.set_qform(affine, code=1)
        nifti.header.set_sform(affine, code=1)
        if image.representation.is_vector:
            nifti.header.set_intent(NIFTI_INTENT_VECTOR)

        watcher.start()
        nib.save(nifti, path.as_posix())
        watcher.end()


def default_codecs() -> list[ImageCodec]:
    return [SimpleITKCodec(), Nifti1DCodec()]
