# SourceRange ties every token and AST node back to the characters it came from
# Offsets are character indices into the script text, end exclusive
class SourceRange:
    __slots__ = ('source', 'start', 'end')

    def __init__(self, source, start, end):
        self.source = source  # Script name given to the lexer
        self.start = start    # First character offset
        self.end = end        # One past the last character offset

    def combine(self, other):
        """Returns a new range spanning both ranges. Neither range is modified."""
        return SourceRange(self.source, min(self.start, other.start), max(self.end, other.end))

    def __eq__(self, other):
        if not isinstance(other, SourceRange):
            return NotImplemented
        return (self.source, self.start, self.end) == (other.source, other.start, other.end)

    def __hash__(self):
        return hash((self.source, self.start, self.end))

    def __repr__(self):
        return f"SourceRange({self.source!r}, {self.start}, {self.end})"

    def __str__(self):
        return f"{self.source}:{self.start}-{self.end}"


def span(first, second):
    """Combines two possibly missing ranges."""
    if first is None:
        return second
    if second is None:
        return first
    return first.combine(second)
