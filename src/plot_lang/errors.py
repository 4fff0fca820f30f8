# errors.py
# Exception hierarchy shared by every stage of the pipeline. Errors carry only
# structured data (kind, message, range); colouring and timestamps belong to
# whoever prints them.


class PlotError(Exception):
    """Base class for every diagnostic raised while running a script."""

    def __init__(self, message, source_range=None):
        super().__init__(message)
        self.message = message
        self.range = source_range

    @property
    def kind(self):
        return type(self).__name__

    def __str__(self):
        return f"{self.kind}: {self.message}"

    def describe(self):
        """Formats the error together with the range it originated from."""
        if self.range is None:
            return str(self)
        return f"{self} ({self.range})"


# Lexing


class LexerError(PlotError):
    pass


class IllegalCharacterError(LexerError):
    pass


class EscapeError(LexerError):
    pass


class EndError(LexerError):
    pass


# Parsing


class ParserError(PlotError):
    pass


class IllegalTokenError(ParserError):
    pass


class MissingTokenError(ParserError):
    pass


# Interpretation


class InterpreterError(PlotError):
    pass


class InvalidValueError(InterpreterError):
    pass


class HeaderAlreadyAccessedError(InterpreterError):
    pass


class InterpretationError(PlotError):
    """Raised once after the whole node list was folded, holding every InterpreterError."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} error(s) while interpreting script")

    def describe(self):
        return "\n".join(error.describe() for error in self.errors)


# Evaluation and rendering


class RenderError(PlotError):
    pass


class InvalidVariableError(RenderError):
    pass


class DivisionByZeroError(RenderError):
    pass


class BranchLimitError(RenderError):
    pass


# Lexer and parser tables disagree, or a node kind reached a stage that cannot handle it
class InternalError(ParserError, RenderError):
    pass


# Collaborators


class ExportError(PlotError):
    pass


class PrinterError(PlotError):
    pass


class UnsupportedPlatformError(PrinterError):
    pass


class PrintCommandError(PrinterError):
    pass
