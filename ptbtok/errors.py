"""Tokenizer-specific exceptions."""

from __future__ import annotations


class TokenizerError(Exception):
    """Base exception for tokenizer errors."""

    pass


class InputError(TokenizerError, ValueError):
    """Exception raised when a tokenizer is built without an input stream."""

    pass


class OptionsError(TokenizerError, ValueError):
    """Exception raised when a tokenizer option has an unusable value.

    Parameters
    ----------
    message
        Error message describing the problem.
    option
        Name of the offending option as written by the caller. None if unknown.
    value
        The rejected value. None if unavailable.

    Attributes
    ----------
    option : str | None
        Name of the offending option.
    value : str | None
        The rejected value.

    Examples
    --------
    >>> try:
    ...     raise OptionsError("Unknown quote style", option="quotes", value="fancy")
    ... except OptionsError as e:
    ...     print(e.option, e.value)
    quotes fancy
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: str | None = None,
    ) -> None:
        self.option = option
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message."""
        parts = [super().__str__()]
        if self.option is not None:
            parts.append(f" (option '{self.option}'")
            if self.value is not None:
                parts.append(f", value '{self.value}'")
            parts.append(")")
        return "".join(parts)


class TokenStreamExhaustedError(TokenizerError):
    """Exception raised when a token is requested from an exhausted tokenizer."""

    pass
