"""Read-only word lists used by the rule table.

Entries are regular expression fragments. Abbreviation entries are matched
case-insensitively; a letter wrapped in ``(?-i:...)`` is pinned to the case
written here (``(?-i:O)re`` matches ``Ore.`` but not ``ore.``).
"""

from __future__ import annotations

from types import MappingProxyType

# apostrophe variants, including the cp1252 right quote and the SGML entity
APOS = r"(?:['\u0092\u2019]|&apos;)"

# abbreviations normally followed by a lower case word (ABBREV1)
ABBREV_MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "Jun", "Jul", "Aug", "Sept?", "Oct", "Nov", "Dec",
)
ABBREV_DAYS: tuple[str, ...] = ("Mon", "Tues?", "Wed", "Thu", "Thurs", "Fri")
ABBREV_STATES: tuple[str, ...] = (
    "Ala", "Ariz", "(?-i:A)rk", "Calif", "Colo", "Conn", "Ct", "Dak", "Del",
    "Fla", "Ga", "(?-i:I)ll", "Ind", "Kans?", "Ky", "La", "(?-i:M)ass", "Md",
    "Mich", "Minn", "(?-i:M)iss", "Mo", "Mont", "Neb", "Nev", "Okla",
    "(?-i:O)re", "Pa", "Penn", "Tenn", "Tex", "Va", "Vt", "(?-i:W)ash", "Wis",
    "Wyo",
)
# Bhd is used by Malaysian companies
ABBREV_COMPANIES: tuple[str, ...] = (
    "Inc", "Cos?", "Corp", "Pp?t[ye]s?", "Ltd", "Plc", "Bancorp", "Dept",
    "Bhd", "Assn", "Univ", "Intl", "Sys",
)
ABBREV_NUMERIC: tuple[str, ...] = ("tel", "est", "ext", "sq")
ABBREV_PERSONAL: tuple[str, ...] = (
    "Jr", "Sr", "Bros", r"(?:Ed|Ph)\.D", "Blvd", "Rd", "Esq",
)
ABBREV_LOWER_MISC: tuple[str, ...] = ("etc", "al", "seq")

ABBREV_LOWER: tuple[str, ...] = (
    ABBREV_MONTHS
    + ABBREV_DAYS
    + ABBREV_STATES
    + ABBREV_COMPANIES
    + ABBREV_NUMERIC
    + ABBREV_PERSONAL
    + ABBREV_LOWER_MISC
)

# abbreviations normally followed by an upper case word (ABBREV2);
# Mt for mountains and Ft for Fort, Ph for Ph. D
ABBREV_TITLES: tuple[str, ...] = (
    "Mr", "Mrs", "Ms", "(?-i:M)iss", "Drs?", "Profs?", "Sens?", "Reps?",
    "Attys?", "Lt", "Col", "Gen", "Messrs", "Govs?", "Adm", "Rev", "Maj",
    "Sgt", "Cpl", "Pvt", "Capt", "Ste?", "Ave", "Pres", "Lieut", "Hon",
    "Brig", "Co?mdr", "Pfc", "Spc", "Supts?", "Det", "Mt", "Ft", "Adj", "Adv",
    "Asst", "Assoc", "Ens", "Insp", "Mlle", "Mme", "Msgr", "Sfc",
)
ABBREV_UPPER_MISC: tuple[str, ...] = (
    "vs", "Alex", "Wm", "Jos", "Cie", r"a\.k\.a", "cf", "TREAS", "Ph",
    "Invt", "Elec", "Natl", "M[ft]g",
)

# abbreviations only recognized before a number: ca. 1300, No. 24, pp. 7
ABBREV_BEFORE_NUMBER: tuple[str, ...] = (
    "ca", "figs?", "prop", "nos?", "art", "bldg", "pp", "op",
)

# an acronym followed by one of these words ends its sentence
SENTENCE_STARTERS: tuple[str, ...] = (
    "About", "According", "Additionally", "After", "An", "A", "As", "At",
    "But", "Earlier", "He", "Her", "Here", "However", "If", "In", "It",
    "Last", "Many", "More", r"Mr\.", r"Ms\.", "Now", "Once", "One", "Other",
    "Our", "She", "Since", "So", "Some", "Such", "That", "The", "Their",
    "Then", "There", "These", "They", "This", "We", "When", "While", "What",
    "Yet", "You",
)

# informal forms split in two; a positive number is the length of the
# first part, a negative one the length of the second part
ASSIMILATIONS: tuple[tuple[str, int], ...] = (
    ("cannot", 3),
    ("gimme", 3),
    ("gonna", 3),
    ("gotta", 3),
    ("lemme", 3),
    ("wanna", 3),
    (APOS + "twas", -3),
    (APOS + "tis", -2),
    ("more" + APOS + "n", 4),
    ("d" + APOS + "ye", 1),
)

# clitics split off the preceding word
CLITICS = APOS + r"(?:[msdMSD]|(?i:re|ve|ll))"
NEGATION = "[nN]" + APOS + "[tT]"

# words with an apostrophe that stay whole
APOSTROPHE_WORDS: tuple[str, ...] = (
    APOS + "n" + APOS + "?",
    "[lLdDjJ]" + APOS,
    "(?i:Dunkin|somethin|ol)" + APOS,
    APOS + "(?i:em|till?|cause)(?![A-Za-z])",
    APOS + "[2-9]0s",
    r"(?i:cont'd\.?|nor'easter|c'mon|e'er|s'mores|ev'ry|li'l|nat'l)",
    "[A-HJ-XZn]" + APOS + r"[^\W\d_]{2,}",
    r"[^\W\d_]+[aeiouyAEIOUY]" + APOS + r"[aeiouA-Z][^\W\d_]*",
    "(?i:O" + APOS + "o)",
    "y" + APOS,
)

FILENAME_EXTENSIONS: tuple[str, ...] = (
    "bat", "bmp", "bz2", "c", "class", "cgi", "cpp", "dll", "doc", "docx",
    "exe", "gif", "gz", "h", "htm", "html", "jar", "java", "jpeg", "jpg",
    "mov", "mp3", "pdf", "php", "pl", "png", "ppt", "ps", "py", "sql", "tar",
    "txt", "wav", "xml", "zip",
)

CURRENCY_SIGNS = (
    "\u00A2\u00A3\u00A4\u00A5\u0080\u20A0\u20AC"
    "\u060B\u0E3F\u20A4\uFFE0\uFFE1\uFFE5\uFFE6"
)

# target for normalizeCurrency; anything not listed becomes $
CURRENCY_NORMALIZATION = MappingProxyType(
    {
        "\u00A2": "cents",
        "\u00A3": "#",
        "\u20A4": "#",
        "\uFFE0": "cents",
        "\uFFE1": "#",
    }
)

FRACTIONS = MappingProxyType(
    {
        "\u00BC": "1/4",
        "\u00BD": "1/2",
        "\u00BE": "3/4",
        "\u2153": "1/3",
        "\u2154": "2/3",
        "\u2155": "1/5",
        "\u2156": "2/5",
        "\u2157": "3/5",
        "\u2158": "4/5",
        "\u2159": "1/6",
        "\u215A": "5/6",
        "\u215B": "1/8",
        "\u215C": "3/8",
        "\u215D": "5/8",
        "\u215E": "7/8",
    }
)

BRACKET_ESCAPES = MappingProxyType(
    {
        "(": "-LRB-",
        ")": "-RRB-",
        "{": "-LCB-",
        "}": "-RCB-",
        "[": "-LSB-",
        "]": "-RSB-",
    }
)
