import click

from imgmaker.coretypes import (
    REPRESENTATION_TABLE,
    SUPPORTED_DIMENSIONS,
    ScalarType,
)


@click.command(name="types")
@click.help_option(
    "-h",
    "--help",
)
def list_types() -> None:
    """List the supported scalar types and the pixel types they map to."""
    from rich.console import Console
    from rich.table import Table

    dims = ", ".join(str(d) for d in SUPPORTED_DIMENSIONS)
    table = Table(title=f"Supported pixel types (dimensions: {dims})")
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("numpy dtype", style="magenta")
    table.add_column("Scalar pixel (1 component)")
    table.add_column("Vector pixel (>1 components)")

    for scalar_type in ScalarType:
        scalar = REPRESENTATION_TABLE[(SUPPORTED_DIMENSIONS[0], scalar_type, False)]
        vector = REPRESENTATION_TABLE[(SUPPORTED_DIMENSIONS[0], scalar_type, True)]
        table.add_row(
            scalar_type.value,
            str(scalar.dtype),
            scalar.sitk_pixel_name,
            vector.sitk_pixel_name,
        )

    Console().print(table)
