# evaluator.py
# Multi-valued evaluation of expression nodes. An expression does not reduce
# to one float: inverse operations such as root() have several real branches,
# so every sub-expression evaluates to a MultiValue holding all of them, and
# binary operations combine two MultiValues as a full cross product.

import math

import pyarrow as pa
import pyarrow.compute as pc

from . import defaults
from .ast import (
    Number, Variable, Equals, Add, Sub, Mul, Div,
    FunctionSin, FunctionCos, FunctionTan, FunctionPow, FunctionRoot
)
from .errors import (
    InvalidVariableError, DivisionByZeroError, BranchLimitError, InternalError
)

# The free variable every equation is plotted against
FREE_VARIABLE = 'x'


class MultiValue:
    """
    Ordered, non-unique collection of every real value a sub-expression can
    take for one value of x. Backed by a pyarrow float64 array.
    """

    __slots__ = ('values',)

    def __init__(self, values):
        if not isinstance(values, pa.Array):
            values = pa.array([float(v) for v in values], type=pa.float64())
        self.values = values

    @classmethod
    def single(cls, value):
        return cls([value])

    def to_pylist(self):
        return self.values.to_pylist()

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.to_pylist())

    def __eq__(self, other):
        if not isinstance(other, MultiValue):
            return NotImplemented
        return self.to_pylist() == other.to_pylist()

    def __repr__(self):
        return "MultiValue{" + ", ".join(f"{v:g}" for v in self.to_pylist()) + "}"


def newton_root(degree, radicand, iterations=defaults.NEWTON_ITERATIONS,
                tolerance=defaults.NEWTON_TOLERANCE):
    """
    Principal real root of radicand by Newton's method, starting from
    radicand / degree. Returns None when the iteration leaves the reals.
    """
    if radicand == 0:
        return 0.0
    guess = radicand / degree
    try:
        for _ in range(iterations):
            following = ((degree - 1) * guess + radicand / math.pow(guess, degree - 1)) / degree
            step = abs(following - guess)
            guess = following
            if step <= tolerance * abs(guess):
                break
    except (ValueError, ZeroDivisionError, OverflowError):
        return None
    if not math.isfinite(guess):
        return None
    return guess


def _is_odd(value):
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def _drop_nan(values):
    return values.filter(pc.invert(pc.is_nan(values)))


class Evaluator:
    """
    Evaluates expression nodes against a bound value of x.

    :param max_branches: Largest MultiValue any single operation may produce.
    """

    def __init__(self, max_branches=defaults.MAX_BRANCHES):
        self.max_branches = max_branches

    def evaluate(self, node, x):
        """
        Reduce node to the MultiValue of all its branches at x.
        :param node: Expression node from the parser or interpreter.
        :param x: Value bound to the free variable.
        :return: MultiValue
        """
        if isinstance(node, Number):
            return MultiValue.single(node.value)

        if isinstance(node, Variable):
            if node.name == FREE_VARIABLE:
                return MultiValue.single(x)
            raise InvalidVariableError(f"Variable `{node.name}` can not be evaluated.", node.range)

        if isinstance(node, (Add, Sub, Mul, Div)):
            left = self.evaluate(node.left, x)
            right = self.evaluate(node.right, x)
            a, b = self._cross(left, right, node)
            if isinstance(node, Add):
                return MultiValue(pc.add(a, b))
            if isinstance(node, Sub):
                return MultiValue(pc.subtract(a, b))
            if isinstance(node, Mul):
                return MultiValue(pc.multiply(a, b))
            if pc.any(pc.equal(b, 0.0)).as_py():
                raise DivisionByZeroError(f"Division by zero in `{node}` at x = {x:g}.", node.range)
            return MultiValue(pc.divide(a, b))

        if isinstance(node, FunctionSin):
            return MultiValue(pc.sin(self.evaluate(node.arg, x).values))
        if isinstance(node, FunctionCos):
            return MultiValue(pc.cos(self.evaluate(node.arg, x).values))
        if isinstance(node, FunctionTan):
            return MultiValue(pc.tan(self.evaluate(node.arg, x).values))

        if isinstance(node, FunctionPow):
            base = self.evaluate(node.base, x)
            exponent = self.evaluate(node.exponent, x)
            a, b = self._cross(base, exponent, node)
            # Negative bases with fractional exponents have no real value
            return MultiValue(_drop_nan(pc.power(a, b)))

        if isinstance(node, FunctionRoot):
            return self._root(node, x)

        # Residual left - right; zero wherever the equation holds
        if isinstance(node, Equals):
            left = self.evaluate(node.left, x)
            right = self.evaluate(node.right, x)
            a, b = self._cross(left, right, node)
            return MultiValue(pc.subtract(a, b))

        raise InternalError(f"Can not evaluate `{node}`.", getattr(node, 'range', None))

    def _cross(self, left, right, node):
        """Pairs every left sample with every right sample, left-major."""
        n, m = len(left), len(right)
        self._check_branches(n * m, node)
        left_indices = pa.array([i for i in range(n) for _ in range(m)], type=pa.int64())
        right_indices = pa.array([j for _ in range(n) for j in range(m)], type=pa.int64())
        return pc.take(left.values, left_indices), pc.take(right.values, right_indices)

    def _root(self, node, x):
        degrees = self.evaluate(node.degree, x)
        radicands = self.evaluate(node.radicand, x)
        results = []
        for degree in degrees:
            for radicand in radicands:
                if not (math.isfinite(degree) and math.isfinite(radicand)) or degree <= 0:
                    continue
                if radicand < 0 and not _is_odd(degree):
                    continue
                principal = newton_root(degree, radicand)
                if principal is None:
                    continue
                results.append(principal)
                # Roots the user did not write are ambiguous in sign
                if not node.explicit:
                    results.append(-principal)
                self._check_branches(len(results), node)
        return MultiValue(results)

    def _check_branches(self, count, node):
        if count > self.max_branches:
            raise BranchLimitError(
                f"`{node}` produced {count} branches (limit {self.max_branches}).", node.range)


def evaluate(node, x, max_branches=defaults.MAX_BRANCHES):
    """Evaluates node at x. Raises the first RenderError encountered."""
    return Evaluator(max_branches).evaluate(node, x)
