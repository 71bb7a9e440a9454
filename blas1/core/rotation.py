"""
Plane (Givens) rotation construction.

rotg builds the rotation that maps (a, b) to (r, 0):

    [ c  s ] [a]   [r]
    [-s  c ] [b] = [0]

and packs (c, s) into a single auxiliary value z so that a later caller can
recover the rotation from (r, z) alone:

    |a| > |b|            z = s
    |b| >= |a|, c != 0   z = 1/c
    c == 0               z = 1
    a == b == 0          z = 0

rotg_decode inverts that packing. Scalar-only, so both backends share it.

References:
- Lawson, Hanson, Kincaid, Krogh (1979). Basic linear algebra subprograms
  for FORTRAN usage.
"""

import math
from typing import NamedTuple, Tuple


class RotationParams(NamedTuple):
    """Result of rotg: (r, z, c, s)."""
    r: float
    z: float
    c: float
    s: float


def rotg(a: float, b: float) -> RotationParams:
    """
    Construct a Givens rotation that zeroes b.

    r carries the sign of whichever operand is larger in magnitude (b on a
    tie), matching reference BLAS. Both operands are divided by the
    larger magnitude before squaring, so r does not overflow when a or b
    is near the top of the double range.

    Args:
        a: First component (rotated onto r)
        b: Second component (rotated onto 0)

    Returns:
        RotationParams(r, z, c, s)
    """
    a = float(a)
    b = float(b)
    abs_a = abs(a)
    abs_b = abs(b)

    if math.isnan(a) or math.isnan(b):
        nan = float('nan')
        return RotationParams(r=nan, z=nan, c=nan, s=nan)
    if abs_a == 0.0 and abs_b == 0.0:
        return RotationParams(r=0.0, z=0.0, c=1.0, s=0.0)

    roe = a if abs_a > abs_b else b
    scale = max(abs_a, abs_b)

    # c and s come from the scaled operands; r itself may round when subnormal
    sigma = math.copysign(1.0, roe)
    ta = a / scale
    tb = b / scale
    rr = math.sqrt(ta * ta + tb * tb)
    r = sigma * (scale * rr)
    c = sigma * (ta / rr)
    s = sigma * (tb / rr)

    if abs_a > abs_b:
        z = s
    elif c != 0.0:
        z = 1.0 / c
    else:
        z = 1.0

    return RotationParams(r=r, z=z, c=c, s=s)


def rotg_decode(z: float) -> Tuple[float, float]:
    """
    Recover (c, s) from the auxiliary value stored by rotg.

    Args:
        z: Auxiliary value (RotationParams.z)

    Returns:
        (c, s)
    """
    z = float(z)
    if z == 1.0:
        return 0.0, 1.0
    if abs(z) < 1.0:
        return math.sqrt(1.0 - z * z), z
    c = 1.0 / z
    return c, math.sqrt(1.0 - c * c)
