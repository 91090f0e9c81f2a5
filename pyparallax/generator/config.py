"""
Configuration parsing for PyParallax.

A configuration is any mapping with a ``layers`` list; each entry is a
table with a string ``type`` ("noise" or "points") plus optional fields.
Every optional field is read through ``get_or_default`` with a typed
converter, so missing keys fall back to the documented default and
malformed values fail with ConfigError before any pixel is generated.

TOML documents can be read with ``load_config`` / ``load_config_string``:

    [[layers]]
    type = "noise"
    innercolor = "#FFFFFF"
    outercolor = "#000000"
    threshold = "0.2"
"""

import math
import sys
from collections.abc import Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .. import constants as cte
from ..color import BLACK, WHITE, BlendFactor, Color
from ..errors import ConfigError, ParameterError
from ..layers import (
    LAYER_TYPES,
    NoiseLayerConfig,
    PointsLayerConfig,
    PointsMaskConfig,
)
from ..noise import NoiseParameters, NoiseType


def load_config(path):
    """
    Read a TOML configuration file.

    Args:
        path: Path to the TOML document

    Returns:
        dict: Parsed document

    Raises:
        ConfigError: If the document is not valid TOML
    """
    with open(path, "rb") as fh:
        try:
            return tomllib.load(fh)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in '{path}': {e}") from e


def load_config_string(text):
    """Parse TOML configuration text."""
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


# Converters ---------------------------------------------------------------


def to_float(value):
    """Accept numbers and numeric strings ("0.5"), nothing else."""
    if isinstance(value, bool):
        raise ConfigError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            raise ConfigError(f"Malformed numeric literal {value!r}") from None
    else:
        raise ConfigError(f"Expected a number, got {value!r}")
    if not math.isfinite(result):
        raise ConfigError(f"Expected a finite number, got {value!r}")
    return result


def to_int(value):
    """Accept integers and integer strings ("12")."""
    if isinstance(value, bool):
        raise ConfigError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ConfigError(f"Malformed integer literal {value!r}") from None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ConfigError(f"Expected an integer, got {value!r}")


def to_seed(value):
    """Integer seed reduced to an unsigned 32-bit value."""
    return to_int(value) & 0xFFFFFFFF


def to_bool(value):
    if not isinstance(value, bool):
        raise ConfigError(f"Expected true or false, got {value!r}")
    return value


def to_color(value):
    return Color.from_hex(value)


def to_blend_factor(value):
    return BlendFactor.parse(value)


def to_noise_type(value):
    return NoiseType.parse(value)


def get_or_default(table, key, default, converter):
    """
    Read an optional field.

    Args:
        table: Layer table
        key: Field name (case-sensitive)
        default: Value returned when ``key`` is absent
        converter: Callable turning the raw value into the field type

    Returns:
        The converted value, or ``default``

    Raises:
        ConfigError: If the value cannot be converted; the message names the field
    """
    if key not in table:
        return default
    try:
        return converter(table[key])
    except ConfigError as e:
        raise ConfigError(f"Field '{key}': {e}") from e


# Layer parsing --------------------------------------------------------------


def parse_noise_parameters(table, prefix=""):
    """Parse seed, noise kind and octave settings, optionally ``mask``-prefixed."""
    return NoiseParameters(
        seed=get_or_default(table, prefix + "seed", cte.DEFAULT_SEED, to_seed),
        noise_type=get_or_default(table, prefix + "noise_type", NoiseType.FBM, to_noise_type),
        frequency=get_or_default(table, prefix + "frequency", cte.DEFAULT_FREQUENCY, to_float),
        persistence=get_or_default(table, prefix + "persistence", cte.DEFAULT_PERSISTENCE, to_float),
        lacunarity=get_or_default(table, prefix + "lacunarity", cte.DEFAULT_LACUNARITY, to_float),
        octaves=get_or_default(table, prefix + "octaves", cte.DEFAULT_OCTAVES, to_int),
    )


def parse_noise_layer(table):
    return NoiseLayerConfig(
        inner_color=get_or_default(table, "innercolor", WHITE, to_color),
        outer_color=get_or_default(table, "outercolor", BLACK, to_color),
        noise=parse_noise_parameters(table),
        threshold=get_or_default(table, "threshold", cte.DEFAULT_THRESHOLD, to_float),
        power=get_or_default(table, "power", cte.DEFAULT_POWER, to_float),
        src_factor=get_or_default(table, "sourcefactor", BlendFactor.One, to_blend_factor),
        dst_factor=get_or_default(table, "destfactor", BlendFactor.One, to_blend_factor),
    )


def parse_points_layer(table):
    mask = None
    if get_or_default(table, "mask", False, to_bool):
        mask = PointsMaskConfig(
            noise=parse_noise_parameters(table, prefix="mask"),
            threshold=get_or_default(table, "maskthreshold", cte.DEFAULT_THRESHOLD, to_float),
            power=get_or_default(table, "maskpower", cte.DEFAULT_POWER, to_float),
        )
    return PointsLayerConfig(
        seed=get_or_default(table, "seed", cte.DEFAULT_SEED, to_seed),
        count=get_or_default(table, "count", cte.DEFAULT_POINT_COUNT, to_int),
        point_size=get_or_default(table, "pointsize", cte.DEFAULT_POINT_SIZE, to_int),
        close_color=get_or_default(table, "closecolor", WHITE, to_color),
        far_color=get_or_default(table, "farcolor", BLACK, to_color),
        src_factor=get_or_default(table, "sourcefactor", BlendFactor.One, to_blend_factor),
        dst_factor=get_or_default(table, "destfactor", BlendFactor.One, to_blend_factor),
        mask=mask,
    )


LAYER_PARSERS = {
    "noise": parse_noise_layer,
    "points": parse_points_layer,
}


def parse_layer(table, index=0):
    """
    Build a layer from one configuration table.

    Args:
        table: Mapping with a string ``type`` field
        index: Position of the table in the layer list, used in error messages

    Returns:
        Layer: NoiseLayer or PointsLayer

    Raises:
        ConfigError: Unknown ``type`` or malformed field
        ParameterError: Semantically invalid field value
    """
    if not isinstance(table, Mapping):
        raise ConfigError(f"Layer {index}: expected a table, got {type(table).__name__}")
    layer_type = table.get("type")
    if not isinstance(layer_type, str) or layer_type not in LAYER_PARSERS:
        raise ConfigError(
            f"Layer {index}: unknown layer type {layer_type!r}, expected one of: "
            + ", ".join(LAYER_PARSERS)
        )
    try:
        config = LAYER_PARSERS[layer_type](table)
    except ConfigError as e:
        raise ConfigError(f"Layer {index} ({layer_type}): {e}") from e
    except ParameterError as e:
        raise ParameterError(f"Layer {index} ({layer_type}): {e}") from e
    return LAYER_TYPES[layer_type](config)


def parse_layers(config):
    """
    Parse the ordered ``layers`` list of a configuration document.

    Raises:
        ConfigError: If ``layers`` is missing or not a list
    """
    if not isinstance(config, Mapping):
        raise ConfigError(f"Configuration must be a table, got {type(config).__name__}")
    if "layers" not in config:
        raise ConfigError("Configuration has no 'layers' list")
    tables = config["layers"]
    if not isinstance(tables, (list, tuple)):
        raise ConfigError(f"'layers' must be a list of tables, got {type(tables).__name__}")
    return [parse_layer(table, index) for index, table in enumerate(tables)]
