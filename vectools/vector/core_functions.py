import math
import numbers

import numpy as np
from .constants import *

##########################################################################################
# Argument checks
##########################################################################################


def to_component(
    value : numbers.Real) -> numbers.Real:
    """
    Convert a single value into a vector component.

    numpy scalars are unwrapped into the equivalent Python scalar so that
    components behave the same whichever way they were created.

    Args:
        value: a real number (Python or numpy scalar)

    Returns:
        component (numbers.Real): the value as a Python number
    """
    if isinstance(value, np.generic):
        value = value.item()
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Vector components must be real numbers. Got {type(value)}")
    return value


def check_dimensions(
    dimensions : int) -> int:
    """
    Validate the number of dimensions requested for a new vector.
    """
    if isinstance(dimensions, bool) or not isinstance(dimensions, (int, np.integer)):
        raise TypeError(f"dimensions must be an integer. Got {type(dimensions)}")
    if dimensions < 0:
        raise ValueError(f"dimensions must be non-negative. Got {dimensions}")
    return int(dimensions)


def check_index(
    n : int) -> int:
    """
    Validate a component index.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"index must be an integer. Got {type(n)}")
    return int(n)


##########################################################################################
# Core functions for vector operations
##########################################################################################


def zip_with_core(
    vec1 : tuple,
    vec2 : tuple,
    combiner) -> list:
    """
    Combine two component sequences pairwise in a single pass.

    The shorter sequence is read as if it were padded with FILL_VALUE up to the
    length of the longer one, so the result always has max(len(vec1), len(vec2))
    entries.

    Args:
        vec1 (tuple)        : components of the left operand
        vec2 (tuple)        : components of the right operand
        combiner (callable) : combiner(left, right) -> number

    Returns:
        out (list): the combined components
    """
    n1, n2 = len(vec1), len(vec2)
    out = []
    for idx in range(max(n1, n2)):
        left = vec1[idx] if idx < n1 else FILL_VALUE
        right = vec2[idx] if idx < n2 else FILL_VALUE
        out.append(combiner(left, right))

    return out


def fold_core(
    vec : tuple,
    reducer,
    init):
    """
    Thread an accumulator through the components in index order.

    Args:
        vec (tuple)        : components
        reducer (callable) : reducer(component, accumulator) -> accumulator
        init               : starting accumulator, of any type

    Returns:
        the final accumulator
    """
    out = init
    for n in vec:
        out = reducer(n, out)

    return out


def strip_fill_core(
    vec : tuple) -> tuple:
    """
    Drop trailing FILL_VALUE components. Two vectors that are equal after
    zero-padding have the same stripped form.
    """
    end = len(vec)
    while end > 0 and vec[end - 1] == FILL_VALUE:
        end -= 1

    return vec[:end]


def to_float_core(
    value : numbers.Real) -> float:
    """
    Convert a component to float. Integers beyond the float range become
    +inf or -inf, as an IEEE-754 overflow would.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def promote_core(
    left : numbers.Real,
    right : numbers.Real) -> tuple:
    """
    Bring a pair of components to a common type. Integers are kept exact
    unless the other side is a float, in which case both become floats.
    """
    if isinstance(left, float) or isinstance(right, float):
        return to_float_core(left), to_float_core(right)
    return left, right


def sqrt_core(
    value : numbers.Real) -> float:
    """
    Square root of a non-negative sum of squares as a float.
    """
    if isinstance(value, numbers.Integral) and math.isinf(to_float_core(value)):
        # too large for float, but its root is not
        return to_float_core(math.isqrt(value))
    return float(np.sqrt(to_float_core(value)))


##########################################################################################
# Component combiners
##########################################################################################


def add_core(left, right):
    left, right = promote_core(left, right)
    return left + right


def sub_core(left, right):
    left, right = promote_core(left, right)
    return left - right


def mul_core(left, right):
    left, right = promote_core(left, right)
    return left * right


def div_core(left, right):
    """
    IEEE-754 division: x/0 gives inf, -inf or nan instead of raising.
    numpy reports the event through its own floating-point error state.
    Two integers with a non-zero divisor are divided exactly by Python.
    """
    if isinstance(left, numbers.Integral) and isinstance(right, numbers.Integral) and right != 0:
        try:
            return left / right
        except OverflowError:
            return math.inf if (left > 0) == (right > 0) else -math.inf
    return np.true_divide(to_float_core(left), to_float_core(right))


def max_core(left, right):
    left, right = promote_core(left, right)
    if isinstance(left, float):
        # nan propagates
        return np.maximum(left, right)
    return max(left, right)


def min_core(left, right):
    left, right = promote_core(left, right)
    if isinstance(left, float):
        return np.minimum(left, right)
    return min(left, right)
