from .core import token as tk
from .ast import (
    Number, Variable, Equals, Add, Sub, Mul, Div,
    DirectiveFrame, DirectiveResolution, DirectiveExport, DirectivePrintNow,
    FunctionSin, FunctionCos, FunctionTan, FunctionPow, FunctionRoot
)
from .errors import IllegalTokenError, MissingTokenError, InternalError

UNARY_FUNCTIONS = {
    'sin': FunctionSin,
    'cos': FunctionCos,
    'tan': FunctionTan,
}

# Tokens that can start a literal; seeing one after a literal means implicit multiplication
LITERAL_STARTS = (tk.LPAREN, tk.NUMBER, tk.VARIABLE, tk.FUNCTION)


# Parser class converts tokens into an Abstract Syntax Tree (AST)
class Parser:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    @property
    def token(self):
        return self.tokens[min(self.pos, len(self.tokens) - 1)]

    # Main parsing method: one directive or equation per line
    def parse(self):
        self.pos = 0
        statements = []
        if not self.tokens:
            return statements
        while self.pos < len(self.tokens) and not self._match(tk.EOF):
            if self._match(tk.EOL):
                self.pos += 1
                continue
            if self._match(tk.HEADER):
                statements.append(self._directive())
            else:
                statements.append(self._expression())
            self._expect(tk.EOL, 'EOL')
        return statements

    # Parses '#' HEADFUNC '(' args ')'
    def _directive(self):
        start = self.token.range
        self.pos += 1  # Skip '#'
        name = self._expect(tk.HEADFUNC, 'HeadFunc')
        if name.value not in tk.HEADFUNCS:
            raise InternalError(f"Unknown directive: `{name.value}`.", name.range)
        self._expect(tk.LPAREN, 'LeftParen')

        if name.value == 'frame':
            args = self._integer_args(4)
        elif name.value == 'resolution':
            args = self._integer_args(2)
        elif name.value == 'export':
            args = [self._expect(tk.STRING, 'String').value]
        else:
            args = []

        end = self._expect(tk.RPAREN, 'RightParen')
        node_range = start.combine(end.range)
        if name.value == 'frame':
            return DirectiveFrame(*args, range=node_range)
        if name.value == 'resolution':
            return DirectiveResolution(*args, range=node_range)
        if name.value == 'export':
            return DirectiveExport(*args, range=node_range)
        return DirectivePrintNow(range=node_range)

    def _integer_args(self, count):
        args = []
        for index in range(count):
            sign = 1
            if self._match(tk.SUBTRACT):
                sign = -1
                self.pos += 1
            token = self.token
            if token.type != tk.NUMBER or '.' in token.value:
                raise MissingTokenError("Expected (Integer, Minus) not found.", token.range)
            args.append(sign * int(token.value))
            self.pos += 1
            if index < count - 1:
                self._expect(tk.COMMA, 'Comma')
        return args

    # Parses term ('=' term)?; a bare term means y = term
    def _expression(self):
        left = self._term()
        if self._match(tk.EQUALS):
            self.pos += 1
            right = self._term()
            return Equals(left, right, left.range.combine(right.range))
        return Equals(Variable('y', left.range), left, left.range)

    def _term(self):
        return self._add_sub()

    def _add_sub(self):
        left = self._mul_div()
        while self._match(tk.ADD) or self._match(tk.SUBTRACT):
            op = Add if self.token.type == tk.ADD else Sub
            self.pos += 1
            right = self._mul_div()
            left = op(left, right, left.range.combine(right.range))
        return left

    def _mul_div(self):
        left = self._juxtaposition()
        while self._match(tk.MULTIPLY) or self._match(tk.DIVIDE):
            op = Mul if self.token.type == tk.MULTIPLY else Div
            self.pos += 1
            right = self._juxtaposition()
            left = op(left, right, left.range.combine(right.range))
        return left

    # Implicit multiplication: "2x" and "xy", grouped to the right
    def _juxtaposition(self):
        left = self._literal()
        if self.token.type in LITERAL_STARTS:
            right = self._juxtaposition()
            return Mul(left, right, left.range.combine(right.range))
        return left

    # Parses literals (parenthesised terms, numbers, variables, function calls)
    def _literal(self):
        token = self.token
        if token.type == tk.LPAREN:
            self.pos += 1  # Skip '('
            expr = self._term()
            end = self._expect(tk.RPAREN, 'RightParen')
            # The group covers its parentheses
            expr.range = token.range.combine(end.range)
            return expr
        elif token.type == tk.NUMBER:
            self.pos += 1
            return Number(token.value, token.range)
        elif token.type == tk.VARIABLE:
            self.pos += 1
            return Variable(token.value, token.range)
        elif token.type == tk.FUNCTION:
            return self._function_call()
        raise IllegalTokenError("Expected (Literal, Variable, Function, LeftParen) not found.", token.range)

    # Parses FUNCNAME '(' term (',' term)? ')'
    def _function_call(self):
        name = self.token
        self.pos += 1
        if name.value not in tk.FUNCTIONS:
            raise InternalError(f"Unknown function: `{name.value}`.", name.range)
        self._expect(tk.LPAREN, 'LeftParen')
        first = self._term()

        if name.value in UNARY_FUNCTIONS:
            end = self._expect(tk.RPAREN, 'RightParen')
            return UNARY_FUNCTIONS[name.value](first, name.range.combine(end.range))

        self._expect(tk.COMMA, 'Comma')
        second = self._term()
        end = self._expect(tk.RPAREN, 'RightParen')
        node_range = name.range.combine(end.range)
        if name.value == 'pow':
            return FunctionPow(first, second, node_range)
        if name.value == 'root':
            return FunctionRoot(first, second, explicit=True, range=node_range)
        raise InternalError(f"Function `{name.value}` has no parse rule.", name.range)

    # Helper methods for parsing
    def _match(self, type):
        return self.token.type == type

    def _expect(self, type, label):
        token = self.token
        if token.type != type:
            raise MissingTokenError(f"Expected ({label}) not found.", token.range)
        self.pos += 1
        return token


def parse(tokens):
    """Parses a token list into top-level nodes. Raises the first ParserError encountered."""
    return Parser(tokens).parse()
