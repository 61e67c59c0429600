"""British to American spelling normalization.

A fixed table of whole-word replacements is consulted first; words not in
the table are tried against a short list of suffix patterns (``-our`` to
``-or``, ``programme``, ``haem-``). Words in ``EXCEPTIONS`` are never
changed. Only lower case and capitalized words are rewritten; all-caps
words are left alone.
"""

from __future__ import annotations

import re
from types import MappingProxyType

_BRITISH_TO_AMERICAN: tuple[tuple[str, str], ...] = (
    ("anaesthetic", "anesthetic"),
    ("analogue", "analog"),
    ("analogues", "analogs"),
    ("analyse", "analyze"),
    ("analysed", "analyzed"),
    ("analysing", "analyzing"),
    ("armoured", "armored"),
    ("cancelled", "canceled"),
    ("cancelling", "canceling"),
    ("capitalise", "capitalize"),
    ("capitalised", "capitalized"),
    ("capitalisation", "capitalization"),
    ("centre", "center"),
    ("centres", "centers"),
    ("chimaeric", "chimeric"),
    ("defence", "defense"),
    ("encyclopaedia", "encyclopedia"),
    ("favourite", "favorite"),
    ("favourites", "favorites"),
    ("fibre", "fiber"),
    ("fibres", "fibers"),
    ("finalise", "finalize"),
    ("finalised", "finalized"),
    ("finalising", "finalizing"),
    ("grey", "gray"),
    ("homologue", "homolog"),
    ("homologues", "homologs"),
    ("honourable", "honorable"),
    ("kerb", "curb"),
    ("labelled", "labeled"),
    ("labelling", "labeling"),
    ("leant", "leaned"),
    ("learnt", "learned"),
    ("localise", "localize"),
    ("localised", "localized"),
    ("manoeuvre", "maneuver"),
    ("manoeuvres", "maneuvers"),
    ("maximise", "maximize"),
    ("maximised", "maximized"),
    ("maximising", "maximizing"),
    ("meagre", "meager"),
    ("minimise", "minimize"),
    ("minimised", "minimized"),
    ("minimising", "minimizing"),
    ("modernise", "modernize"),
    ("modernised", "modernized"),
    ("modernising", "modernizing"),
    ("neighbourhood", "neighborhood"),
    ("neighbourhoods", "neighborhoods"),
    ("oestrogen", "estrogen"),
    ("oestrogens", "estrogens"),
    ("organisation", "organization"),
    ("organisations", "organizations"),
    ("penalise", "penalize"),
    ("penalised", "penalized"),
    ("popularise", "popularize"),
    ("popularised", "popularized"),
    ("popularises", "popularizes"),
    ("popularising", "popularizing"),
    ("practise", "practice"),
    ("practised", "practiced"),
    ("pressurise", "pressurize"),
    ("pressurised", "pressurized"),
    ("pressurises", "pressurizes"),
    ("pressurising", "pressurizing"),
    ("realise", "realize"),
    ("realised", "realized"),
    ("realising", "realizing"),
    ("realises", "realizes"),
    ("recognise", "recognize"),
    ("recognised", "recognized"),
    ("recognising", "recognizing"),
    ("recognises", "recognizes"),
    ("theatre", "theater"),
    ("theatres", "theaters"),
    ("titre", "titer"),
    ("titres", "titers"),
    ("travelled", "traveled"),
    ("travelling", "traveling"),
)

# -our words that are not British spellings
EXCEPTIONS: frozenset[str] = frozenset(
    {
        "amour", "contour", "contours", "detour", "detours",
        "devour", "devours", "dour", "flour", "flours", "four", "fours",
        "hour", "hours", "our", "ours", "paramour", "pour", "pours", "scour",
        "scours", "sour", "succour", "tour", "tours", "troubadour", "velour",
        "your", "yours",
    }
)

_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"haem(at)?o"), r"hem\1o"),
    (re.compile(r"aemia$"), "emia"),
    (re.compile(r"([lL])eukaem"), r"\1eukem"),
    (re.compile(r"programme(s?)$"), r"program\1"),
)
_OUR_ENDING = re.compile(r"^([a-z]{3,})our(s?|ed|ing|ful|ite|ites)$")

MAPPING = MappingProxyType(dict(_BRITISH_TO_AMERICAN))


def _americanize_lower(word: str) -> str:
    if word in EXCEPTIONS:
        return word
    mapped = MAPPING.get(word)
    if mapped is not None:
        return mapped
    for pattern, replacement in _PATTERNS:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    match = _OUR_ENDING.match(word)
    if match is None:
        return word
    # inflections of devour, contour and the like keep their spelling
    if match.group(1) + "our" in EXCEPTIONS:
        return word
    return _OUR_ENDING.sub(r"\1or\2", word)


def americanize(word: str) -> str:
    """Return the American spelling of ``word``.

    Parameters
    ----------
    word : str
        A single word.

    Returns
    -------
    str
        The rewritten word, or ``word`` itself when no rule applies.

    Examples
    --------
    >>> americanize("colourful")
    'colorful'
    >>> americanize("Centre")
    'Center'
    >>> americanize("hour")
    'hour'
    """
    # too short to carry a British spelling
    if len(word) < 4:
        return word
    if word.islower():
        return _americanize_lower(word)
    if word[0].isupper() and word[1:].islower():
        lowered = word[0].lower() + word[1:]
        converted = _americanize_lower(lowered)
        if converted != lowered:
            return converted[0].upper() + converted[1:]
    return word
