"""Render examples/space.toml at two sizes and check that the result tiles."""

import os

import numpy as np

import pyparallax as ppx

here = os.path.dirname(os.path.abspath(__file__))
config = ppx.load_config(os.path.join(here, "space.toml"))

for width, height in [(512, 256), (1024, 512)]:
    canvas = ppx.generate_parallax(config, (width, height))
    ppx.misc.save_canvas(canvas, os.path.join(here, f"space_{width}x{height}.png"))

    # Two copies side by side should not show a seam
    tiled = np.concatenate([canvas, canvas], axis=1)
    print(f"{width}x{height}: tiled shape {tiled.shape}, mean {canvas[..., :3].mean():.1f}")

ppx.misc.show_canvas(canvas, title="space.toml")
