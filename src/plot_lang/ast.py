# Abstract Syntax Tree (AST) Node classes
# These classes represent the structure of the program after parsing.
# Nodes are never modified after construction; equality is structural and
# ignores source ranges so re-parsed scripts compare equal.
from .lexer import escapify


class Node:
    _fields = ()

    def __init__(self, range=None):
        self.range = range  # SourceRange covering the node's text

    def children(self):
        return tuple(value for value in (getattr(self, name) for name in self._fields)
                     if isinstance(value, Node))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self._fields)

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(getattr(self, name) for name in self._fields))

    def __repr__(self):
        fields = ', '.join(repr(getattr(self, name)) for name in self._fields)
        return f"{type(self).__name__}({fields})"


# Represents a numeric literal (e.g., 2, 0.5)
class Number(Node):
    _fields = ('value',)

    def __init__(self, value, range=None):
        super().__init__(range)
        self.value = float(value)

    def __str__(self):
        return f"{self.value:g}"


# Represents a single-letter variable; only x and y mean anything
class Variable(Node):
    _fields = ('name',)

    def __init__(self, name, range=None):
        super().__init__(range)
        self.name = name

    def __str__(self):
        return self.name


# Represents an equation line (e.g., y = 2x)
class Equals(Node):
    _fields = ('left', 'right')

    def __init__(self, left, right, range=None):
        super().__init__(range)
        self.left = left
        self.right = right

    def __str__(self):
        return f"({self.left} = {self.right})"


class BinaryOp(Node):
    _fields = ('left', 'right')
    symbol = '?'

    def __init__(self, left, right, range=None):
        super().__init__(range)
        self.left = left    # Left operand
        self.right = right  # Right operand

    def __str__(self):
        return f"({self.left} {self.symbol} {self.right})"


class Add(BinaryOp):
    symbol = '+'


class Sub(BinaryOp):
    symbol = '-'


class Mul(BinaryOp):
    symbol = '*'


class Div(BinaryOp):
    symbol = '/'


# Directives (e.g., #frame(0, 0, 10, 10))
class DirectiveFrame(Node):
    _fields = ('x', 'y', 'w', 'h')

    def __init__(self, x, y, w, h, range=None):
        super().__init__(range)
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def __str__(self):
        return f"#frame({self.x}, {self.y}, {self.w}, {self.h})"


class DirectiveResolution(Node):
    _fields = ('w', 'h')

    def __init__(self, w, h, range=None):
        super().__init__(range)
        self.w = w
        self.h = h

    def __str__(self):
        return f"#resolution({self.w}, {self.h})"


class DirectiveExport(Node):
    _fields = ('path',)

    def __init__(self, path, range=None):
        super().__init__(range)
        self.path = path

    def __str__(self):
        return f"#export(\"{escapify(self.path)}\")"


class DirectivePrintNow(Node):
    def __str__(self):
        return "#print_now()"


# Function calls (e.g., sin(x), root(2, x))
class UnaryFunction(Node):
    _fields = ('arg',)
    name = '?'

    def __init__(self, arg, range=None):
        super().__init__(range)
        self.arg = arg

    def __str__(self):
        return f"{self.name}({self.arg})"


class FunctionSin(UnaryFunction):
    name = 'sin'


class FunctionCos(UnaryFunction):
    name = 'cos'


class FunctionTan(UnaryFunction):
    name = 'tan'


class FunctionPow(Node):
    _fields = ('base', 'exponent')

    def __init__(self, base, exponent, range=None):
        super().__init__(range)
        self.base = base
        self.exponent = exponent

    def __str__(self):
        return f"pow({self.base}, {self.exponent})"


# explicit is True for root() calls written in the script, False for roots
# synthesized while solving an equation for y
class FunctionRoot(Node):
    _fields = ('degree', 'radicand', 'explicit')

    def __init__(self, degree, radicand, explicit=True, range=None):
        super().__init__(range)
        self.degree = degree
        self.radicand = radicand
        self.explicit = explicit

    def __str__(self):
        return f"root({self.degree}, {self.radicand})"
