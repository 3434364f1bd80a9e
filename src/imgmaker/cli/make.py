import pathlib
from typing import Any, Optional

import click

from imgmaker.cli.param_types import FLOAT_LIST, INT_LIST
from imgmaker.loggers import logger

# NOTE: THIS MUST MATCH imgmaker.io.writers.ExistingFileMode
existing_file_choices = ["overwrite", "skip", "fail"]


@click.command()
@click.argument(
    "output",
    required=False,
    type=click.Path(
        dir_okay=False,
        writable=True,
        path_type=pathlib.Path,
    ),
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="YAML file with `image` and `writer` sections. Command line options override it.",
)
@click.option(
    "--dimension",
    "-d",
    type=int,
    help="Number of spatial axes: 1, 2 or 3.  [default: 3]",
)
@click.option(
    "--components",
    "-n",
    "number_of_components",
    type=int,
    help="Components per pixel; more than one writes a vector image.  [default: 1]",
)
@click.option(
    "--scalar-type",
    "-t",
    type=str,
    help="uchar, char, ushort, short, uint, int, ulong, long, float or double.  [default: uchar]",
)
@click.option(
    "--size",
    type=INT_LIST,
    help="Pixels along each axis, comma separated (e.g. 10,10,10).",
)
@click.option(
    "--spacing",
    type=FLOAT_LIST,
    help="Physical spacing along each axis.  [default: all ones]",
)
@click.option(
    "--origin",
    type=FLOAT_LIST,
    help="Physical position of the first pixel.  [default: all zeros]",
)
@click.option(
    "--direction",
    type=FLOAT_LIST,
    help="Direction cosines, row-major.  [default: identity]",
)
@click.option(
    "--fill-value",
    "fill_values",
    type=FLOAT_LIST,
    help="Pixel component values, reused cyclically (e.g. 10,20).  [default: 0]",
)
@click.option(
    "--existing-file-mode",
    type=click.Choice(existing_file_choices, case_sensitive=False),
    help="What to do when OUTPUT already exists.  [default: overwrite]",
)
@click.option(
    "--create-dirs/--no-create-dirs",
    default=None,
    help="Create missing parent directories of OUTPUT.  [default: create]",
)
@click.option(
    "--progress/--no-progress",
    "show_progress",
    default=None,
    help="Show a progress bar while writing.  [default: progress]",
)
@click.help_option(
    "-h",
    "--help",
)
@click.pass_context
def make(
    ctx: click.Context,
    output: Optional[pathlib.Path],
    config_file: Optional[pathlib.Path],
    dimension: Optional[int],
    number_of_components: Optional[int],
    scalar_type: Optional[str],
    size: Optional[tuple],
    spacing: Optional[tuple],
    origin: Optional[tuple],
    direction: Optional[tuple],
    fill_values: Optional[tuple],
    existing_file_mode: Optional[str],
    create_dirs: Optional[bool],
    show_progress: Optional[bool],
) -> None:
    """Create a uniformly filled image and write it to OUTPUT.

    \b
    The file format follows the extension of OUTPUT (.nrrd, .mha, .nii.gz,
    ...). 1-D images can only be written as NIfTI (.nii / .nii.gz).

    \b
    Examples:
      imgmaker make blank.nrrd --size 10,10,10 --fill-value 255
      imgmaker make rgb.mha -d 2 -n 3 -t float --size 64,64 --fill-value 10,20
      imgmaker make --config imgmaker.yaml
    """
    from imgmaker.config import ImageMakerSettings
    from imgmaker.exceptions import ConfigurationError
    from imgmaker.pipeline import make_image
    from imgmaker.utils import expand_dictionary

    logger.debug("Debug Args", args=ctx.params)

    flat_overrides: dict[str, Any] = {
        "image.output_path": output,
        "image.dimension": dimension,
        "image.number_of_components": number_of_components,
        "image.scalar_type": scalar_type,
        "image.size": size,
        "image.spacing": spacing,
        "image.origin": origin,
        "image.direction": direction,
        "image.fill_values": fill_values,
        "writer.existing_file_mode": existing_file_mode.lower() if existing_file_mode else None,
        "writer.create_dirs": create_dirs,
        "writer.show_progress": show_progress,
    }
    overrides = expand_dictionary(
        {k: v for k, v in flat_overrides.items() if v is not None}
    )

    try:
        if config_file is not None:
            settings = ImageMakerSettings.from_user_yaml(config_file, overrides)
        else:
            settings = ImageMakerSettings.load(**overrides)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        click.echo(f"imgmaker: invalid configuration: {e}", err=True)
        ctx.exit(1)

    try:
        result = make_image(settings.image, settings.writer)
    except Exception as e:
        logger.exception("Unexpected failure while making the image")
        raise click.Abort() from e

    if not result.ok:
        click.echo(f"imgmaker: {result.error}", err=True)
    ctx.exit(result.exit_code)


if __name__ == "__main__":
    make()
