"""Tokenizer option model and option-string parsing.

Options can be given as a ``TokenizerOptions`` instance, as a mapping, or
as a comma-separated option string in the traditional form
``"invertible,strictTreebank3=true,quotes=ascii"``. Names may use either
the snake_case field name or the camelCase alias. Unknown names are
ignored; unusable values raise ``OptionsError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ptbtok.errors import OptionsError

logger = logging.getLogger(__name__)

QuoteStyle = Literal["latex", "unicode", "ascii", "original"]
EllipsisStyle = Literal["ptb3", "unicode", "original"]
UntokenizablePolicy = Literal[
    "noneDelete", "firstDelete", "allDelete", "noneKeep", "firstKeep", "allKeep"
]

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})

# legacy boolean switches that select a value of an enum option
_LEGACY_ENUM_SWITCHES: dict[str, tuple[str, str]] = {
    "latexQuotes": ("quotes", "latex"),
    "unicodeQuotes": ("quotes", "unicode"),
    "asciiQuotes": ("quotes", "ascii"),
    "ptb3Ellipsis": ("ellipses", "ptb3"),
    "unicodeEllipsis": ("ellipses", "unicode"),
}

# fields switched off together by ``ptb3Escaping=false``
_PTB3_ESCAPING_FIELDS: tuple[str, ...] = (
    "normalize_ampersand_entity",
    "normalize_currency",
    "normalize_fractions",
    "normalize_parentheses",
    "normalize_other_brackets",
    "ptb3_dashes",
)


class TokenizerOptions(BaseModel):
    """Immutable tokenizer configuration.

    Attributes
    ----------
    invertible : bool
        Record original text, surrounding whitespace and offsets so the
        source can be rebuilt from the tokens.
    tokenize_newlines : bool
        Emit newlines as ``*NL*`` tokens instead of treating them as
        whitespace.
    strict_treebank3 : bool
        Use the historical Treebank-3 rules; sentence-final abbreviations
        other than ``U.S.`` lose their period.
    americanize : bool
        Rewrite British spellings to American ones in token text.
    normalize_space : bool
        Replace spaces inside tokens (phone numbers, fractions, tags) with
        non-breaking spaces.
    normalize_ampersand_entity : bool
        Decode ``&amp;`` and other SGML entities.
    normalize_currency : bool
        Map currency signs other than ``$`` to ``$``, ``#`` or ``c``.
    normalize_fractions : bool
        Spell out Unicode vulgar fractions as ``1/2`` style tokens.
    normalize_parentheses : bool
        Escape round brackets as ``-LRB-`` and ``-RRB-``.
    normalize_other_brackets : bool
        Escape square and curly brackets as ``-LSB-``, ``-RSB-``,
        ``-LCB-`` and ``-RCB-``.
    quotes : QuoteStyle
        Target style for quotation marks.
    ellipses : EllipsisStyle
        Target style for ellipses.
    ptb3_dashes : bool
        Render en and em dashes as ``--``.
    escape_forward_slash_asterisk : bool
        Escape ``/`` and ``*`` with a backslash as in the original Treebank.
    split_assimilations : bool
        Split informal forms such as ``gonna`` and ``cannot`` in two.
    markup_tags : bool
        Keep tag-like markup such as ``<P>`` as single tokens.
    untokenizable : UntokenizablePolicy
        Whether characters no rule covers are deleted or kept, and whether
        none, the first, or all of them are logged.

    Examples
    --------
    >>> options = TokenizerOptions(invertible=True)
    >>> options.invertible
    True
    >>> options.americanize
    True
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    invertible: bool = Field(default=False, alias="invertible")
    tokenize_newlines: bool = Field(default=False, alias="tokenizeNLs")
    strict_treebank3: bool = Field(default=False, alias="strictTreebank3")
    americanize: bool = Field(default=True, alias="americanize")
    normalize_space: bool = Field(default=True, alias="normalizeSpace")
    normalize_ampersand_entity: bool = Field(
        default=True, alias="normalizeAmpersandEntity"
    )
    normalize_currency: bool = Field(default=False, alias="normalizeCurrency")
    normalize_fractions: bool = Field(default=False, alias="normalizeFractions")
    normalize_parentheses: bool = Field(default=True, alias="normalizeParentheses")
    normalize_other_brackets: bool = Field(
        default=True, alias="normalizeOtherBrackets"
    )
    quotes: QuoteStyle = Field(default="latex", alias="quotes")
    ellipses: EllipsisStyle = Field(default="ptb3", alias="ellipses")
    ptb3_dashes: bool = Field(default=True, alias="ptb3Dashes")
    escape_forward_slash_asterisk: bool = Field(
        default=False, alias="escapeForwardSlashAsterisk"
    )
    split_assimilations: bool = Field(default=True, alias="splitAssimilations")
    markup_tags: bool = Field(default=True, alias="markupTags")
    untokenizable: UntokenizablePolicy = Field(
        default="firstKeep", alias="untokenizable"
    )

    def to_option_string(self) -> str:
        """Render the options that differ from the defaults as an option string.

        Returns
        -------
        str
            Comma-separated ``alias=value`` pairs.

        Examples
        --------
        >>> TokenizerOptions(invertible=True).to_option_string()
        'invertible=true'
        """
        parts: list[str] = []
        defaults = TokenizerOptions()
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value == getattr(defaults, name):
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            parts.append(f"{field.alias or name}={value}")
        return ",".join(parts)


def _field_names() -> dict[str, str]:
    """Map every accepted option name (field or alias) to its field name."""
    names: dict[str, str] = {}
    for name, field in TokenizerOptions.model_fields.items():
        names[name] = name
        if field.alias is not None:
            names[field.alias] = name
    return names


_OPTION_NAMES = _field_names()


def _parse_bool(option: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise OptionsError("Expected a boolean value", option=option, value=str(value))


def _split_option_string(source: str) -> dict[str, object]:
    """Split ``"a,b=false"`` into ``{"a": True, "b": "false"}``."""
    raw: dict[str, object] = {}
    for item in source.split(","):
        item = item.strip()
        if not item:
            continue
        if "=" in item:
            key, value = item.split("=", 1)
            raw[key.strip()] = value.strip()
        else:
            raw[item] = True
    return raw


def parse_options(
    source: TokenizerOptions | Mapping[str, Any] | str | None = None,
) -> TokenizerOptions:
    """Resolve an option source into ``TokenizerOptions``.

    Parameters
    ----------
    source : TokenizerOptions | Mapping[str, Any] | str | None
        Options object, mapping of option names to values, option string,
        or None for the defaults.

    Returns
    -------
    TokenizerOptions
        Resolved, immutable options.

    Raises
    ------
    OptionsError
        If a boolean option has a non-boolean value or an enum option has
        an unknown value.

    Examples
    --------
    >>> parse_options("invertible,strictTreebank3=true").strict_treebank3
    True
    >>> parse_options("quotes=ascii").quotes
    'ascii'
    >>> parse_options("noSuchOption").invertible
    False
    """
    if source is None:
        return TokenizerOptions()
    if isinstance(source, TokenizerOptions):
        return source

    raw = _split_option_string(source) if isinstance(source, str) else dict(source)
    values: dict[str, object] = {}

    # ptb3Escaping goes first so explicit settings can override it
    if "ptb3Escaping" in raw:
        if not _parse_bool("ptb3Escaping", raw.pop("ptb3Escaping")):
            for name in _PTB3_ESCAPING_FIELDS:
                values[name] = False
            values["quotes"] = "original"
            values["ellipses"] = "original"

    for key, value in raw.items():
        if key in _LEGACY_ENUM_SWITCHES:
            field_name, selected = _LEGACY_ENUM_SWITCHES[key]
            if _parse_bool(key, value):
                values[field_name] = selected
            else:
                default = TokenizerOptions.model_fields[field_name].default
                if values.get(field_name, default) == selected:
                    values[field_name] = "original"
            continue

        field_name = _OPTION_NAMES.get(key)
        if field_name is None:
            logger.debug("Ignoring unknown tokenizer option: %s", key)
            continue

        annotation = TokenizerOptions.model_fields[field_name].annotation
        if annotation is bool:
            values[field_name] = _parse_bool(key, value)
        else:
            text = str(value)
            if text not in get_args(annotation):
                raise OptionsError(
                    f"Unknown value; expected one of {', '.join(get_args(annotation))}",
                    option=key,
                    value=text,
                )
            values[field_name] = text

    try:
        return TokenizerOptions(**values)
    except ValidationError as e:
        raise OptionsError(f"Invalid tokenizer options: {e}") from e


def merge_options(
    base: TokenizerOptions,
    source: TokenizerOptions | Mapping[str, Any] | str | None,
) -> TokenizerOptions:
    """Apply the settings named in ``source`` on top of ``base``.

    Only options ``source`` sets explicitly replace values of ``base``.

    Parameters
    ----------
    base : TokenizerOptions
        Options to start from.
    source : TokenizerOptions | Mapping[str, Any] | str | None
        Overriding settings, in any form ``parse_options`` accepts.

    Returns
    -------
    TokenizerOptions
        Combined options.

    Examples
    --------
    >>> base = parse_options("invertible")
    >>> merged = merge_options(base, "quotes=ascii")
    >>> merged.invertible, merged.quotes
    (True, 'ascii')
    """
    override = parse_options(source)
    return base.model_copy(
        update=override.model_dump(include=override.model_fields_set)
    )
