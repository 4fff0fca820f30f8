# Token kinds produced by the lexer and consumed by the parser
VARIABLE = 'variable'
NUMBER = 'number'
STRING = 'string'

ADD = '+'
SUBTRACT = '-'
MULTIPLY = '*'
DIVIDE = '/'
EQUALS = '='

LPAREN = 'lparen'
RPAREN = 'rparen'
COMMA = ','

HEADER = '#'
HEADFUNC = 'headfunc'
FUNCTION = 'function'

EOL = 'eol'
EOF = 'eof'

# Letter runs matching these names become a single keyword token
HEADFUNCS = ('frame', 'resolution', 'export', 'print_now')
FUNCTIONS = ('sin', 'cos', 'tan', 'pow', 'root')


# Token class represents a single token in the source code with position tracking
class Token:
    __slots__ = ('type', 'value', 'range')

    def __init__(self, type, value, range):
        self.type = type    # Token kind (e.g., NUMBER, HEADFUNC, EOL)
        self.value = value  # Literal text; empty for operators and markers
        self.range = range  # SourceRange the token was read from

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.range) == (other.type, other.value, other.range)

    def __hash__(self):
        return hash((self.type, self.value, self.range))

    def __repr__(self):
        return f"Token({self.type!r}, {self.value!r}, {self.range!r})"

    def __str__(self):
        if self.value:
            return f"<{self.type}: {self.value}>"
        return f"<{self.type}>"
