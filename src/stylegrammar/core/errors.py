"""
Error types for stylegrammar syntax parsing, token expansion and registries.

Only programmer and configuration errors are raised. Expected runtime
conditions (unknown tokens, unclassifiable values, values matching no variant)
are returned as result objects, see ``stylegrammar.core.ir.results``.
"""

from dataclasses import dataclass
from typing import Optional


class StyleGrammarError(Exception):
    """Base exception for all stylegrammar errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class SyntaxParseError(StyleGrammarError):
    """
    Raised when a Value Definition Syntax string cannot be parsed.

    Examples:
    - Unbalanced brackets or parentheses
    - Multiplier with nothing to repeat
    - Combinator with a missing operand
    """

    pass


class CyclicTokenDefinitionError(StyleGrammarError):
    """
    Raised when token expansion detects a definition cycle.

    Example: ``<a>`` defined as ``<b> | x`` while ``<b>`` is defined as ``<a>``.
    """

    def __init__(self, chain: list[str]):
        self.chain = list(chain)
        super().__init__(f"Cyclic token definition: {' -> '.join(self.chain)}")


class RegistryError(StyleGrammarError):
    """
    Raised when a registry entry is rejected.

    Examples:
    - Duplicate token, unit, token type or style key
    - Token definition referencing an unregistered token type
    - Registration after the registry has been sealed
    """

    pass


class CombinatorLimitError(StyleGrammarError):
    """Raised when ``||`` or ``&&`` has more operands than the engine allows."""

    pass


class ConfigError(StyleGrammarError):
    """Raised when the engine configuration file is unreadable or invalid."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a syntax string.

    Attributes:
        syntax: The syntax string being processed
        position: 0-indexed character offset of the error
        token: Optional token reference being expanded when the error occurred
    """

    syntax: str
    position: int
    token: str | None = None

    def format(self) -> str:
        """
        Format the context as the syntax line with a marker under the offset.

        Returns:
            Two lines: the syntax and a ``^`` marker, prefixed with the token if any
        """
        header = f"in {self.token}: " if self.token else ""
        marker = " " * (len(header) + self.position) + "^"
        return f"{header}{self.syntax}\n{marker}"


def make_syntax_error(message: str, syntax: str, position: int) -> SyntaxParseError:
    """
    Helper to create a SyntaxParseError with context.

    Args:
        message: Error description
        syntax: Syntax string being parsed
        position: Character offset of the offending input

    Returns:
        SyntaxParseError with context attached
    """
    return SyntaxParseError(message, ErrorContext(syntax=syntax, position=position))
