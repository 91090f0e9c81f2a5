"""
Parallax generation CLI command for PyParallax.

Command line interface turning a TOML layer configuration into a PNG.
"""

import logging
import sys

import click

from ..errors import ParallaxError
from ..generator import generate_parallax, load_config
from ..logging_config import setup_logging
from ..misc import save_canvas, show_canvas


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output PNG filename (default: config name with .png extension)",
)
@click.option("--width", "-W", type=click.IntRange(min=1), default=1920, show_default=True,
              help="Image width in pixels")
@click.option("--height", "-H", type=click.IntRange(min=1), default=1080, show_default=True,
              help="Image height in pixels")
@click.option("--show", is_flag=True, default=False, help="Preview the result with matplotlib")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(config_file, output, width, height, show, verbose):
    """
    Generate a seamless parallax background from a layer configuration.

    CONFIG_FILE: TOML document with a [[layers]] array of tables

    Examples:

        # 1920x1080 background next to the config
        ppx-generate space.toml

        # Square tile with a custom output name
        ppx-generate space.toml -W 512 -H 512 -o tile.png

        # With timing output
        ppx-generate -v space.toml
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    if output is None:
        output = config_file.rsplit(".", 1)[0] + ".png"

    try:
        if verbose:
            click.echo(f"Loading configuration from '{config_file}'...")
        config = load_config(config_file)

        canvas = generate_parallax(config, (width, height))

        if verbose:
            click.echo(f"Saving PNG to '{output}'...")
        save_canvas(canvas, output)
        click.echo(f"Generated '{config_file}' -> '{output}' ({width}x{height})")

    except ParallaxError as e:
        click.echo(f"Error: invalid configuration - {e}", err=True)
        sys.exit(1)

    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if show:
        show_canvas(canvas, title=output)


if __name__ == "__main__":
    generate()
