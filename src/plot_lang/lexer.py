from .core.source_range import SourceRange
from .core import token as tk
from .core.token import Token
from .errors import IllegalCharacterError, EscapeError, EndError

LETTERS = 'abcdefghijklmnopqrstuvwxyz'
DIGITS = '0123456789'

# Characters allowed after a backslash inside a string, and what they stand for
ESCAPES = {
    '\\': '\\',
    'n': '\n',
    '\n': '\n',
    't': '\t',
    "'": "'",
    '"': '"',
}

SINGLE_CHARACTERS = {
    '+': tk.ADD,
    '-': tk.SUBTRACT,
    '*': tk.MULTIPLY,
    '/': tk.DIVIDE,
    '=': tk.EQUALS,
    '(': tk.LPAREN,
    ')': tk.RPAREN,
    '#': tk.HEADER,
    ',': tk.COMMA,
}


def escapify(text):
    """Makes control characters and quotes visible inside diagnostics."""
    replacements = {'\n': '\\n', '\t': '\\t', '`': '\\`', "'": "\\'", '"': '\\"', '\\': '\\\\'}
    return ''.join(replacements.get(char, char) for char in text)


# Lexer class breaks down source code into tokens
class Lexer:
    def __init__(self, text, source_name='<script>'):
        self.text = text                # Source code to tokenize
        self.source_name = source_name  # Reported in every token range
        self.pos = 0                    # Current position in text
        self.tokens = []

    # Main tokenization method that processes the entire source code
    def tokenize(self):
        self.pos = 0
        self.tokens = []
        while self.pos < len(self.text):
            char = self.text[self.pos]

            # Spaces and tabs separate tokens but are otherwise ignored
            if char in ' \t':
                self.pos += 1
            elif char in '\r\n':
                self._emit(tk.EOL, '', self.pos, self.pos + 1)
                self.pos += 1
            # Directive names, function names and variables
            elif char in LETTERS:
                self._word()
            elif char in DIGITS:
                self._number()
            elif char == '"':
                self._string()
            elif char in SINGLE_CHARACTERS:
                self._emit(SINGLE_CHARACTERS[char], '', self.pos, self.pos + 1)
                self.pos += 1
            else:
                raise IllegalCharacterError(
                    f"Illegal character `{escapify(char)}` was found.",
                    self._range(self.pos, self.pos + 1))

        # Always finish with EOL and EOF so the parser never runs off the end
        self._emit(tk.EOL, '', self.pos, self.pos)
        self._emit(tk.EOF, '', self.pos, self.pos)
        return self.tokens

    # Helper methods for tokenization
    def _range(self, start, end):
        return SourceRange(self.source_name, start, end)

    def _emit(self, type, value, start, end):
        self.tokens.append(Token(type, value, self._range(start, end)))

    def _word(self):
        start = self.pos
        while self.pos < len(self.text) and (self.text[self.pos] in LETTERS or self.text[self.pos] == '_'):
            self.pos += 1
        word = self.text[start:self.pos]

        if word in tk.HEADFUNCS:
            self._emit(tk.HEADFUNC, word, start, self.pos)
        elif word in tk.FUNCTIONS:
            self._emit(tk.FUNCTION, word, start, self.pos)
        elif '_' in word:
            # Underscores only belong to directive names and digit runs
            bad = start + word.index('_')
            raise IllegalCharacterError("Illegal character `_` was found.", self._range(bad, bad + 1))
        else:
            # Unknown runs become one variable per letter so "xy" reads as x * y
            for offset, char in enumerate(word):
                self._emit(tk.VARIABLE, char, start + offset, start + offset + 1)

    def _number(self):
        start = self.pos
        digits = ''
        seen_dot = False
        while self.pos < len(self.text) and (self.text[self.pos] in DIGITS or self.text[self.pos] in '._'):
            char = self.text[self.pos]
            if char == '.':
                if seen_dot:
                    break
                seen_dot = True
            if char != '_':
                digits += char
            self.pos += 1
        self._emit(tk.NUMBER, digits, start, self.pos)

    def _string(self):
        start = self.pos
        self.pos += 1  # Skip opening quote
        result = ''
        escaped = False
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if escaped:
                if char not in ESCAPES:
                    raise EscapeError(
                        f"Can not escape character: `{escapify(char)}`.",
                        self._range(self.pos, self.pos + 1))
                result += ESCAPES[char]
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                self.pos += 1
                self._emit(tk.STRING, result, start, self.pos)
                return
            elif char in '\r\n':
                raise EndError("Invalid EOL.", self._range(self.pos, self.pos + 1))
            else:
                result += char
            self.pos += 1
        raise EndError("Invalid EOF.", self._range(self.pos, self.pos))


def lex(source_name, text):
    """Tokenizes script text. Raises the first LexerError encountered."""
    return Lexer(text, source_name).tokenize()
