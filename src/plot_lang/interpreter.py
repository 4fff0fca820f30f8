import logging

from . import defaults
from .core.source_range import span
from .ast import (
    Variable, Equals, Add, Sub, Mul, Div,
    DirectiveFrame, DirectiveResolution, DirectiveExport, DirectivePrintNow,
    FunctionPow, FunctionRoot
)
from .errors import InvalidValueError, HeaderAlreadyAccessedError, InterpretationError

logger = logging.getLogger(__name__)

# The variable an equation line is solved for
BOUND_VARIABLE = 'y'


class Layout:
    """
    The interpreted program: output frame, resolution, export target and the
    right-hand sides of every equation, in source order. Each directive can
    be applied at most once.
    """

    def __init__(self):
        self.set_frame = False
        self.set_resolution = False
        self.set_export = False
        self.print_now = False

        self.position = defaults.POSITION
        self.size = defaults.SIZE
        self.resolution = defaults.RESOLUTION
        self.export = defaults.EXPORT

        self.equations = []

    def effective_resolution(self):
        """Resolution with zero components replaced by the frame size."""
        width, height = self.resolution
        return (width or self.size[0], height or self.size[1])

    def __repr__(self):
        return (f"Layout(position={self.position}, size={self.size}, resolution={self.resolution}, "
                f"export={self.export!r}, print_now={self.print_now}, equations={len(self.equations)})")


class Interpreter:
    def __init__(self):
        self.layout = Layout()
        self.errors = []

    def interpret(self, statements):
        """
        Folds top-level nodes into a Layout, left to right.

        Errors from one node do not stop later nodes from being applied; if
        any were collected an InterpretationError holding all of them is raised.

        Args:
            statements (list): Top-level nodes from the parser

        Returns:
            Layout: The interpreted program
        """
        self.layout = Layout()
        self.errors = []
        for node in statements:
            try:
                self._apply(node)
            except (InvalidValueError, HeaderAlreadyAccessedError) as e:
                self.errors.append(e)
        if self.errors:
            raise InterpretationError(self.errors)
        return self.layout

    def _apply(self, node):
        layout = self.layout
        if isinstance(node, DirectiveFrame):
            if node.w <= 0 or node.h <= 0:
                raise InvalidValueError("Frame width and height must be at least 1.", node.range)
            self._claim('frame', 'set_frame', node)
            layout.position = (node.x, node.y)
            layout.size = (node.w, node.h)
        elif isinstance(node, DirectiveResolution):
            if node.w < 0 or node.h < 0:
                raise InvalidValueError("Resolution width and height must be at least 0.", node.range)
            self._claim('resolution', 'set_resolution', node)
            layout.resolution = (node.w, node.h)
        elif isinstance(node, DirectiveExport):
            self._claim('export', 'set_export', node)
            layout.export = node.path
        elif isinstance(node, DirectivePrintNow):
            self._claim('print_now', 'print_now', node)
        elif isinstance(node, Equals):
            self._equation(node)
        else:
            logger.warning("Ignoring unsupported top-level node `%s`", node)

    def _claim(self, name, flag, node):
        if getattr(self.layout, flag):
            raise HeaderAlreadyAccessedError(f"Header `{name}` has already been accessed.", node.range)
        setattr(self.layout, flag, True)

    def _equation(self, node):
        if _is_bound_variable(node.left):
            self.layout.equations.append(node.right)
            return
        solved = solve_for_y(node.left, node.right)
        if solved is None:
            logger.warning("Can not solve `%s` for %s; equation ignored", node, BOUND_VARIABLE)
            return
        logger.debug("Rewrote `%s` as %s = %s", node, BOUND_VARIABLE, solved)
        self.layout.equations.append(solved)


def _is_bound_variable(node):
    return isinstance(node, Variable) and node.name == BOUND_VARIABLE


def _count_bound(node):
    if _is_bound_variable(node):
        return 1
    return sum(_count_bound(child) for child in node.children())


def solve_for_y(left, right):
    """
    Rewrites left = right as y = expression by undoing the operations around
    the single y on the left, one at a time. Returns None when that is not
    possible (y missing, repeated, on the right, or under a function that
    cannot be inverted).
    """
    if _count_bound(left) != 1 or _count_bound(right) != 0:
        return None
    while not _is_bound_variable(left):
        step = _invert(left, right)
        if step is None:
            return None
        left, right = step
    return right


def _invert(left, right):
    node_range = span(left.range, right.range)
    if isinstance(left, (Add, Sub, Mul, Div)):
        a, b = left.left, left.right
        if _count_bound(a):
            # a op b = r  ->  a = r (inverse op) b
            inverse = {Add: Sub, Sub: Add, Mul: Div, Div: Mul}[type(left)]
            return a, inverse(right, b, node_range)
        if isinstance(left, Add):
            return b, Sub(right, a, node_range)
        if isinstance(left, Sub):
            return b, Sub(a, right, node_range)
        if isinstance(left, Mul):
            return b, Div(right, a, node_range)
        return b, Div(a, right, node_range)
    if isinstance(left, FunctionPow) and _count_bound(left.base):
        return left.base, FunctionRoot(left.exponent, right, explicit=False, range=node_range)
    if isinstance(left, FunctionRoot) and _count_bound(left.radicand):
        return left.radicand, FunctionPow(right, left.degree, node_range)
    return None


def interpret(statements):
    """Folds parsed nodes into a Layout. Raises InterpretationError listing every failure."""
    return Interpreter().interpret(statements)
