"""
Torus-mapped Perlin noise for PyParallax.

Each tile axis is wrapped onto a circle: the horizontal coordinate traces
a circle in the (x, y) plane and the vertical one in the (z, w) plane, so
a tile becomes a torus embedded in 4D. Sampling 4D gradient noise along
that torus repeats exactly with the tile and keeps the octave frequency
continuous: an octave of frequency ``f`` travels ``f`` lattice units
across one period. Octaves share one seeded permutation table and are
decorrelated with a per-octave hash offset.
"""

import math

import numpy as np
import taichi as ti

from .. import constants as cte

# Offset added to lattice x indices before hashing, per octave
OCTAVE_HASH_OFFSET = 59

# Centre of every torus, mid-cell so small radii avoid the zero-valued lattice points
TORUS_CENTER = 0.5

TAU = 2.0 * math.pi


def fisher_yates_permutation(seed: int) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    Args:
        seed: Random seed for reproducible permutation

    Returns:
        512-element permutation array (256 values duplicated)
    """
    rng = np.random.RandomState(seed & 0xFFFFFFFF)

    perm = np.arange(256, dtype=np.int32)

    for i in range(255, 0, -1):
        j = rng.randint(0, i + 1)
        perm[i], perm[j] = perm[j], perm[i]

    # Duplicate to 512 elements for easier wrapping
    return np.concatenate([perm, perm])


def _gradient_table_4d():
    # Edges of the 4D hypercube: one zero component, three +-1 components
    rows = []
    for zero_axis in range(4):
        for signs in range(8):
            row = [1.0 if signs >> bit & 1 else -1.0 for bit in range(3)]
            row.insert(zero_axis, 0.0)
            rows.append(row)
    return np.array(rows, dtype=cte.FLOAT_TYPE_NP)


# 32 gradient vectors of classic 4D Perlin noise
GRADIENTS_4D = _gradient_table_4d()


@ti.func
def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@ti.func
def grad4(hash_val: ti.i32, dx, dy, dz, dw, gradients: ti.template()):
    """Dot product of a hashed gradient vector with the distance vector"""
    idx = hash_val & 31
    return (gradients[idx, 0] * dx + gradients[idx, 1] * dy
            + gradients[idx, 2] * dz + gradients[idx, 3] * dw)


@ti.func
def lattice_hash4(X: ti.i32, Y: ti.i32, Z: ti.i32, W: ti.i32, offset: ti.i32,
                  perm: ti.template()) -> ti.i32:
    h = perm[(X + offset) & 255]
    h = perm[(h + Y) & 255]
    h = perm[(h + Z) & 255]
    return perm[(h + W) & 255]


@ti.func
def perlin4_at(x, y, z, w, octave: ti.i32, perm: ti.template(), gradients: ti.template()):
    """
    4D Perlin noise at (x, y, z, w).

    The 16 corner contributions are weighted with the product of the faded
    distances along each axis, which is the multilinear interpolation of
    the classic nested lerps.

    Returns:
        Noise value, roughly in [-1, 1]
    """
    xf = ti.floor(x)
    yf = ti.floor(y)
    zf = ti.floor(z)
    wf = ti.floor(w)

    X = ti.cast(xf, ti.i32)
    Y = ti.cast(yf, ti.i32)
    Z = ti.cast(zf, ti.i32)
    W = ti.cast(wf, ti.i32)

    dx = x - xf
    dy = y - yf
    dz = z - zf
    dw = w - wf

    u = fade(dx)
    v = fade(dy)
    s = fade(dz)
    t = fade(dw)

    offset = octave * OCTAVE_HASH_OFFSET
    total = ti.cast(0.0, cte.FLOAT_TYPE_TI)
    for corner in ti.static(range(16)):
        cx = corner & 1
        cy = (corner >> 1) & 1
        cz = (corner >> 2) & 1
        cw = (corner >> 3) & 1
        weight = ((cx * u + (1 - cx) * (1.0 - u))
                  * (cy * v + (1 - cy) * (1.0 - v))
                  * (cz * s + (1 - cz) * (1.0 - s))
                  * (cw * t + (1 - cw) * (1.0 - t)))
        h = lattice_hash4(X + cx, Y + cy, Z + cz, W + cw, offset, perm)
        total += weight * grad4(h, dx - cx, dy - cy, dz - cz, dw - cw, gradients)
    return total


@ti.kernel
def tiled_noise_kernel(us: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                       vs: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                       out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                       frequencies: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                       amplitudes: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                       ridged: ti.i32,
                       perm: ti.types.ndarray(dtype=ti.i32, ndim=1),
                       gradients: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2)):
    """
    Accumulate octaves of torus-mapped Perlin noise.

    Args:
        us, vs: Wrapped tile coordinates in [0, 1)
        out: Output array, same length as ``us``
        frequencies: Lattice units travelled per period, per octave
        amplitudes: Normalised amplitude of each octave
        ridged: Non-zero to accumulate ``1 - |noise|`` per octave
        perm: 512-element permutation table
        gradients: 32x4 gradient vector table
    """
    for k in range(us.shape[0]):
        cu = ti.cos(us[k] * TAU)
        su = ti.sin(us[k] * TAU)
        cv = ti.cos(vs[k] * TAU)
        sv = ti.sin(vs[k] * TAU)
        total = ti.cast(0.0, cte.FLOAT_TYPE_TI)
        for octave in range(frequencies.shape[0]):
            radius = frequencies[octave] / TAU
            n = perlin4_at(TORUS_CENTER + radius * cu, TORUS_CENTER + radius * su,
                           TORUS_CENTER + radius * cv, TORUS_CENTER + radius * sv,
                           octave, perm, gradients)
            if ridged != 0:
                n = 1.0 - ti.abs(n)
            total += n * amplitudes[octave]
        if ridged != 0:
            total = total * 2.0 - 1.0
        out[k] = ti.min(1.0, ti.max(-1.0, total))
