"""Domain-specific exceptions.

Every error raised by the library derives from ScientificNotationError,
and both concrete kinds are also ValueErrors so callers that only know
about the builtin hierarchy still catch them.
"""


class ScientificNotationError(Exception):
    """Base exception for all library errors."""


# ============================================================================
# Input Errors
# ============================================================================


class InvalidInputError(ScientificNotationError, ValueError):
    """Raised when there is nothing usable to format.

    Covers None, blank strings, unsupported runtime types and invalid
    formatting options.
    """


class MalformedNumberError(ScientificNotationError, ValueError):
    """Raised when a non-blank string matches no numeric grammar."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Input string '{text}' is not a valid number")
        self.text = text
