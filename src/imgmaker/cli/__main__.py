"""Command-line interface for med-imagemaker.

    imgmaker make OUTPUT [OPTIONS]   create and write an image
    imgmaker types                   list the supported pixel types
"""

import click

from imgmaker import __version__

from . import set_log_verbosity
from .list_types import list_types
from .make import make


@click.group(no_args_is_help=True)
@set_log_verbosity()
@click.version_option(
    version=__version__,
    package_name="med-imagemaker",
    prog_name="imgmaker",
    message="%(package)s:%(prog)s:%(version)s",
)
@click.help_option("-h", "--help")
def cli(verbose: int, quiet: bool) -> None:
    """Create blank N-dimensional images with explicit geometry."""
    pass


cli.add_command(make)
cli.add_command(list_types)

if __name__ == "__main__":
    cli()
