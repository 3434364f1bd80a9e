from pathlib import Path

import nibabel as nib
import numpy as np
import pytest
import SimpleITK as sitk
import yaml

from imgmaker import __version__
from imgmaker.cli.__main__ import cli


def test_make_uchar_volume(runner, tmp_path: Path) -> None:
    out = tmp_path / "blank.nrrd"
    result = runner.invoke(
        cli,
        ["make", str(out), "--size", "10,10,10", "--fill-value", "255", "--no-progress"],
    )
    assert result.exit_code == 0, result.output
    image = sitk.ReadImage(out.as_posix())
    assert image.GetSize() == (10, 10, 10)
    assert image.GetPixelID() == sitk.sitkUInt8
    assert np.all(sitk.GetArrayViewFromImage(image) == 255)


def test_make_vector_image(runner, tmp_path: Path) -> None:
    out = tmp_path / "rgb.mha"
    result = runner.invoke(
        cli,
        [
            "make", str(out),
            "-d", "2",
            "-n", "3",
            "-t", "float",
            "--size", "6,4",
            "--spacing", "0.5,2",
            "--fill-value", "10,20",
            "--no-progress",
        ],
    )
    assert result.exit_code == 0, result.output
    image = sitk.ReadImage(out.as_posix())
    assert image.GetPixelID() == sitk.sitkVectorFloat32
    assert image.GetSpacing() == pytest.approx((0.5, 2.0))
    array = sitk.GetArrayFromImage(image)
    assert array.shape == (4, 6, 3)
    assert np.all(array == np.array([10, 20, 10], dtype=np.float32))


def test_make_negative_fill(runner, tmp_path: Path) -> None:
    out = tmp_path / "signed.nrrd"
    result = runner.invoke(
        cli,
        ["make", str(out), "-t", "short", "--size", "2,2,2", "--fill-value=-5", "--no-progress"],
    )
    assert result.exit_code == 0, result.output
    assert np.all(sitk.GetArrayViewFromImage(sitk.ReadImage(out.as_posix())) == -5)


def test_make_1d_nifti(runner, tmp_path: Path) -> None:
    out = tmp_path / "line.nii.gz"
    result = runner.invoke(
        cli,
        ["make", str(out), "-d", "1", "-t", "int", "--size", "5", "--fill-value", "7", "--no-progress"],
    )
    assert result.exit_code == 0, result.output
    data = np.asanyarray(nib.load(out).dataobj)
    assert data.shape[0] == 5
    assert np.all(data == 7)


def test_make_bogus_type(runner, tmp_path: Path) -> None:
    out = tmp_path / "never.nrrd"
    result = runner.invoke(
        cli,
        ["make", str(out), "-t", "bogus", "--size", "2,2,2", "--no-progress"],
    )
    assert result.exit_code == 1
    assert "unknown component type" in result.output
    assert not out.exists()


def test_make_wrong_size_length(runner, tmp_path: Path) -> None:
    out = tmp_path / "never.nrrd"
    result = runner.invoke(cli, ["make", str(out), "--size", "2,2", "--no-progress"])
    assert result.exit_code == 1
    assert "invalid configuration" in result.output
    assert not out.exists()


def test_make_bad_number_list(runner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["make", str(tmp_path / "x.nrrd"), "--size", "a,b"])
    assert result.exit_code == 2
    assert "comma-separated list of integer" in result.output


def test_make_existing_file_fail(runner, tmp_path: Path) -> None:
    out = tmp_path / "taken.nrrd"
    out.write_bytes(b"taken")
    result = runner.invoke(
        cli,
        ["make", str(out), "--size", "2,2,2", "--existing-file-mode", "fail", "--no-progress"],
    )
    assert result.exit_code == 1
    assert out.read_bytes() == b"taken"


def test_make_from_config(runner, tmp_path: Path) -> None:
    config = tmp_path / "imgmaker.yaml"
    config.write_text(
        yaml.safe_dump(
            {
                "image": {
                    "dimension": 2,
                    "scalar_type": "ushort",
                    "size": [3, 5],
                    "origin": [1.0, -1.0],
                    "fill_values": [42],
                    "output_path": str(tmp_path / "from_config.nrrd"),
                },
                "writer": {"show_progress": False},
            }
        )
    )
    override = tmp_path / "sub" / "override.nrrd"
    result = runner.invoke(
        cli, ["make", str(override), "--config", str(config), "--fill-value", "7"]
    )
    assert result.exit_code == 0, result.output
    assert not (tmp_path / "from_config.nrrd").exists()

    image = sitk.ReadImage(override.as_posix())
    assert image.GetSize() == (3, 5)
    assert image.GetOrigin() == pytest.approx((1.0, -1.0))
    assert image.GetPixelID() == sitk.sitkUInt16
    assert np.all(sitk.GetArrayViewFromImage(image) == 7)


def test_missing_config(runner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["make", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 2


def test_types(runner) -> None:
    result = runner.invoke(cli, ["types"])
    assert result.exit_code == 0, result.output
    for tag in ("uchar", "ushort", "ulong", "double"):
        assert tag in result.output


def test_version(runner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_args_shows_help(runner) -> None:
    result = runner.invoke(cli, [])
    assert "make" in result.output
    assert "types" in result.output
