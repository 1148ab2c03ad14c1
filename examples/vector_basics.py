"""
    Example script showing the Vector type in VECtools

"""

import numpy as np
from vectools import Vector

if __name__ == "__main__":
    a = Vector(1, 2)
    b = Vector.from_array([1, 2, 3])

    # Mismatched dimensions are zero-padded
    print(f"a + b = {a.add(b)}")
    print(f"a . b = {a.dot(b)}")
    print(f"|(3, 4)| = {Vector(3, 4).magnitude()}")

    # Keep components inside a box
    box_lo = Vector.origin()
    box_hi = Vector.repeated(2, 3)
    print(f"clamped = {Vector(-1, 1, 5).clamp(box_lo, box_hi)}")

    # Out-of-range access gives None
    print(f"a.z() = {a.z()}, b.at(-1) = {b.at(-1)}")

    # Division by zero follows IEEE-754
    with np.errstate(divide="ignore"):
        print(f"b / a = {b.div(a)}")
