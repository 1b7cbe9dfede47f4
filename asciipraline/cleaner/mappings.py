# asciipraline mappings: fixed symbol table, no locale-specific entries.

from types import MappingProxyType

# 1→n replacements (the only expanding substitutions in the pipeline)
REPLACEMENT_TABLE = MappingProxyType(
    {
        # typographic quotes → ASCII
        "“": '"',
        "”": '"',
        "„": '"',
        "«": '"',
        "»": '"',
        "″": '"',
        "‘": "'",
        "’": "'",
        "‚": "'",
        "′": "'",
        # dashes → hyphen
        "–": "-",
        "—": "-",
        "‐": "-",
        "‑": "-",
        "‒": "-",
        "…": "...",
        # bullets / operators
        "•": "*",
        "·": ".",
        "×": "x",
        "÷": "/",
        "°": " deg ",
        # currency
        "€": "EUR",
        "£": "GBP",
        "¥": "YEN",
        "¢": "c",
        # marks
        "©": "(c)",
        "®": "(R)",
        "™": "(TM)",
    }
)

# str.translate table, built once
REPLACEMENT_TRANSLATE_MAP = str.maketrans(dict(REPLACEMENT_TABLE))

# Combining Diacritical Marks block
COMBINING_MARKS_START = 0x0300
COMBINING_MARKS_END = 0x036F
