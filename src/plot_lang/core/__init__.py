from .source_range import SourceRange, span
from .token import Token

__all__ = ['SourceRange', 'Token', 'span']
