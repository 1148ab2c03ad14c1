"""
    VECtools Vector Module

    This module provides an immutable N-dimensional vector value type with
    element-wise arithmetic, reductions and comparisons. Vectors of different
    dimension can always be combined: the shorter one is read as if it were
    padded with zeros up to the length of the longer one.

    Every operation returns a new Vector; the operands are never modified.

"""

import numbers

import numpy as np
from .constants import *
from .core_functions import *


class Vector():
    """
    Immutable ordered sequence of real numbers representing a point or
    direction in n-dimensional space.

    Example:
        >>> a = Vector(1, 2)
        >>> b = Vector.from_array([1, 2, 3])
        >>> a.add(b).to_array()
        [2, 4, 3]
        >>> Vector(3, 4).magnitude()
        5.0
    """

    def __init__(
        self,
        *nums) -> None:
        """
        Construct a vector from explicit components.

        Args:
            *nums: the components, in order. No arguments gives the
                   zero-dimensional vector.
        """
        self._vec = tuple(to_component(n) for n in nums)


    ##############################################################################
    # Construction
    ##############################################################################

    @classmethod
    def from_array(
        cls,
        array) -> "Vector":
        """
        Construct a vector from an ordered sequence of numbers.

        Args:
            array: list, tuple, iterable or 1-D numpy array of numbers

        Returns:
            Vector with the same components and dimension
        """
        if isinstance(array, np.ndarray) and array.ndim != 1:
            raise ValueError(f"array must be 1-D, got {array.ndim}D")
        return cls(*array)


    @classmethod
    def repeated(
        cls,
        num : numbers.Real,
        dimensions : int) -> "Vector":
        """
        Vector of the given dimension with every component equal to num.
        """
        return cls.from_array([num] * check_dimensions(dimensions))


    @classmethod
    def origin(
        cls,
        dimensions : int = DEFAULT_NUM_OF_DIMS) -> "Vector":
        """
        All-zero vector of the given dimension (3 by default).
        """
        return cls.repeated(FILL_VALUE, dimensions)


    ##############################################################################
    # Access
    ##############################################################################

    def to_array(self) -> list:
        """
        Components as a new list. Changing the list does not change the vector.
        """
        return list(self._vec)


    def to_numpy(self) -> np.ndarray:
        """
        Components as a new float64 numpy array.
        """
        return np.array(self._vec, dtype=np.float64)


    def x(self):
        return self.nth(X)

    def y(self):
        return self.nth(Y)

    def z(self):
        return self.nth(Z)

    def i(self):
        return self.nth(I)

    def j(self):
        return self.nth(J)

    def k(self):
        return self.nth(K)


    def nth(
        self,
        n : int):
        """
        Component at index n.

        Args:
            n (int): index, counted from 0. Negative indices are out of range.

        Returns:
            the component, or None if the vector has no component at n
        """
        n = check_index(n)
        if 0 <= n < len(self._vec):
            return self._vec[n]
        return None


    def at(
        self,
        n : int):
        """
        Component at index n, where negative n counts back from the end
        (-1 is the last component).

        Returns:
            the component, or None if n is out of range in either direction
        """
        n = check_index(n)
        if -len(self._vec) <= n < len(self._vec):
            return self._vec[n]
        return None


    def size(self) -> int:
        """
        Number of components.
        """
        return len(self._vec)


    ##############################################################################
    # Pairwise operations
    ##############################################################################

    def zip_with(
        self,
        other : "Vector",
        combiner) -> "Vector":
        """
        Combine this vector with another one component by component.

        Walks both vectors by index, substituting 0 for a component that one of
        them lacks, and collects combiner(left, right) into a new vector of
        dimension max(self.size(), other.size()). Mismatched dimensions never
        fail.

        Args:
            other (Vector)      : right operand
            combiner (callable) : combiner(left, right) -> number

        Returns:
            the combined Vector
        """
        _check_vector(other)
        return Vector.from_array(zip_with_core(self._vec,
                                               other._vec,
                                               combiner))


    def mul(
        self,
        other : "Vector") -> "Vector":
        """
        Component-wise product.
        """
        return self.zip_with(other, mul_core)


    def div(
        self,
        other : "Vector") -> "Vector":
        """
        Component-wise quotient.

        Division by a zero component, including one supplied by zero-padding,
        gives inf, -inf or nan. numpy emits its usual RuntimeWarning for it
        unless silenced with numpy.errstate.
        """
        return self.zip_with(other, div_core)


    def add(
        self,
        other : "Vector") -> "Vector":
        """
        Component-wise sum.
        """
        return self.zip_with(other, add_core)


    def sub(
        self,
        other : "Vector") -> "Vector":
        """
        Component-wise difference.
        """
        return self.zip_with(other, sub_core)


    def clamp(
        self,
        lo : "Vector",
        hi : "Vector") -> "Vector":
        """
        Bound every component below by lo and above by hi.

        Applied as two passes (max with lo, then min with hi), so zero-padding
        from either bound carries into the result.
        """
        return self.zip_with(lo, max_core).zip_with(hi, min_core)


    def dot(
        self,
        other : "Vector") -> numbers.Real:
        """
        Dot product: sum of the component-wise products.
        """
        return self.mul(other).reduce(lambda n, acc: add_core(acc, n))


    def equals(
        self,
        other : "Vector") -> bool:
        """
        True if every component of self - other is exactly 0.

        The comparison is exact. Trailing zeros do not matter, so
        Vector(1, 2, 0) equals Vector(1, 2). A vector holding nan or an
        infinity is not equal to anything, itself included.
        """
        return self.sub(other).all(lambda n: n == 0)


    ##############################################################################
    # Unary and aggregate operations
    ##############################################################################

    def map(
        self,
        mapper) -> "Vector":
        """
        Apply mapper to every component.
        """
        return Vector.from_array([mapper(n) for n in self._vec])


    def scale(
        self,
        f : numbers.Real) -> "Vector":
        """
        Multiply every component by the scalar f.
        """
        return self.map(lambda n: n * f)


    def fold(
        self,
        reducer,
        init):
        """
        Reduce the components in index order into an accumulator.

        Args:
            reducer (callable) : reducer(component, accumulator) -> accumulator
            init               : initial accumulator; may be of any type

        Returns:
            the final accumulator
        """
        return fold_core(self._vec, reducer, init)


    def reduce(
        self,
        reducer) -> numbers.Real:
        """
        Numeric fold starting from 0.
        """
        return self.fold(reducer, 0)


    def magnitude(self) -> float:
        """
        Euclidean norm, sqrt(self . self).
        """
        return sqrt_core(self.dot(self))


    def any(
        self,
        predicate) -> bool:
        """
        True if at least one component satisfies predicate.
        """
        return any(predicate(n) for n in self._vec)


    def all(
        self,
        predicate) -> bool:
        """
        True if every component satisfies predicate.
        """
        return all(predicate(n) for n in self._vec)


    ##############################################################################
    # Python protocols
    ##############################################################################

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(n) for n in self._vec)})"

    def __len__(self) -> int:
        return self.size()

    def __iter__(self):
        return iter(self._vec)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # equals compares mixed int/float pairs as floats
        return hash(strip_fill_core(tuple(to_float_core(n) for n in self._vec)))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __truediv__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.div(other)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.mul(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __neg__(self):
        return self.scale(-1)


def _check_vector(
    other) -> None:
    if not isinstance(other, Vector):
        raise TypeError(f"Expected a Vector operand. Got {type(other)}")


def _is_scalar(
    value) -> bool:
    return isinstance(value, numbers.Real)
