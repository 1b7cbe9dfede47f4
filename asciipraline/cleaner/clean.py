# asciipraline/cleaner/clean.py
from __future__ import annotations

import json
import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Literal, NamedTuple, Sequence, Tuple, Union

from .mappings import (
    COMBINING_MARKS_END,
    COMBINING_MARKS_START,
    REPLACEMENT_TABLE,
    REPLACEMENT_TRANSLATE_MAP,
)

__all__ = [
    "convert",
    "convert_with_report",
    "transliterate",
    "transliterate_lines",
    "run_rules",
    "is_ascii",
    "ConversionReport",
    "Rule",
    "RULES",
]

logger = logging.getLogger(__name__)

ReportMode = Literal[False, True, "detail"]

# ---------------------------------------------------------------------------
# Pre-compiled regexes
# ---------------------------------------------------------------------------

RE_COMBINING_MARKS = re.compile(
    f"[\\u{COMBINING_MARKS_START:04x}-\\u{COMBINING_MARKS_END:04x}]"
)

# Anything outside 0x00-0x7F
RE_NON_ASCII = re.compile(r"[^\x00-\x7F]")

# Horizontal whitespace only; newlines are handled separately
RE_HSPACE = re.compile(r"[ \t]+")

RE_CR = re.compile(r"\r\n?")

# Same set JavaScript's trim()/trimEnd() strip within ASCII
ASCII_WHITESPACE = " \t\n\v\f\r"


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass
class ConversionReport:
    """
    Statistics for one conversion.

    :param in_chars: Length of the input string (codepoints).
    :param out_chars: Length of the ASCII output.
    :param detail_enabled: Whether the detail fields were collected.
    :param substitutions: Characters replaced through ``REPLACEMENT_TABLE``.
    :param dropped_codepoints: ``U+XXXX`` labels of characters removed by the
        non-ASCII catch-all, in input order.
    """

    in_chars: int
    out_chars: int
    detail_enabled: bool = False
    substitutions: int = 0
    dropped_codepoints: List[str] = field(default_factory=list)

    @property
    def removed(self) -> int:
        # Signed: expanding substitutions (€ -> EUR) can make this negative.
        return self.in_chars - self.out_chars

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "inChars": self.in_chars,
            "outChars": self.out_chars,
            "removed": self.removed,
        }
        if self.detail_enabled:
            out["substitutions"] = self.substitutions
            out["droppedCodepoints"] = list(self.dropped_codepoints)
        return out

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)


# ---------------------------------------------------------------------------
# Rules (order is load-bearing)
# ---------------------------------------------------------------------------


class Rule(NamedTuple):
    name: str
    apply: Callable[[str], str]


def _decompose(s: str) -> str:
    # NFD first so accents become separable combining marks
    return unicodedata.normalize("NFD", s)


def _substitute(s: str) -> str:
    # Must precede the non-ASCII drop, otherwise typographic punctuation is lost
    return s.translate(REPLACEMENT_TRANSLATE_MAP)


def _strip_marks(s: str) -> str:
    return RE_COMBINING_MARKS.sub("", s)


def _strip_non_ascii(s: str) -> str:
    return RE_NON_ASCII.sub("", s)


def _collapse_whitespace(s: str) -> str:
    return RE_HSPACE.sub(" ", s)


def _normalize_line_endings(s: str) -> str:
    return RE_CR.sub("\n", s)


def _trim_lines(s: str) -> str:
    return "\n".join(line.rstrip(ASCII_WHITESPACE) for line in s.split("\n"))


def _trim(s: str) -> str:
    return s.strip(ASCII_WHITESPACE)


RULES: Tuple[Rule, ...] = (
    Rule("decompose", _decompose),
    Rule("substitute", _substitute),
    Rule("strip_marks", _strip_marks),
    Rule("strip_non_ascii", _strip_non_ascii),
    Rule("collapse_whitespace", _collapse_whitespace),
    Rule("normalize_line_endings", _normalize_line_endings),
    Rule("trim_lines", _trim_lines),
    Rule("trim", _trim),
)


def run_rules(s: str, rules: Sequence[Rule]) -> str:
    """
    Apply ``rules`` to ``s`` in order.

    Both :func:`convert` and the stage pipeline go through here, so a stage
    built from a prefix of :data:`RULES` is always a partial conversion.
    """
    for rule in rules:
        s = rule.apply(s)
    return s


def is_ascii(s: str) -> bool:
    return all(ord(ch) < 128 for ch in s)


# --- convert ----------------------------------------------------


def convert(s: str) -> str:
    """
    Convert any text to pure ASCII (codepoints 0-127).

    Total over ``str``: empty strings, lone surrogates and unmapped scripts
    are accepted; unmapped non-ASCII characters are dropped.

    :param s: Input text.
    :returns: ASCII text.
    """
    if not isinstance(s, str):
        raise TypeError(f"convert() expects str, got {type(s).__name__}")
    if not s:
        return ""
    return run_rules(s, RULES)


def _collect_detail(s: str, rep: ConversionReport) -> str:
    """
    Run the pipeline while recording substitutions and dropped codepoints.

    Produces the same text as :func:`convert`.
    """
    s = _decompose(s)
    rep.substitutions = sum(1 for ch in s if ch in REPLACEMENT_TABLE)
    s = _substitute(s)
    s = _strip_marks(s)
    rep.dropped_codepoints = [
        f"U+{ord(ch):04X}" for ch in s if ord(ch) >= 128
    ]
    return run_rules(s, RULES[3:])


def convert_with_report(
    s: str, *, detail: bool = False
) -> Tuple[str, ConversionReport]:
    """
    Convert ``s`` and return the ASCII text with its statistics.

    :param s: Input text.
    :param detail: Also record substitutions and dropped codepoints.
    :returns: ``(ascii, report)``.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"convert_with_report() expects str, got {type(s).__name__}"
        )

    rep = ConversionReport(in_chars=len(s), out_chars=0, detail_enabled=detail)
    if not s:
        return "", rep

    out = _collect_detail(s, rep) if detail else run_rules(s, RULES)
    rep.out_chars = len(out)

    logger.debug(
        "converted %d -> %d chars (removed=%d)",
        rep.in_chars,
        rep.out_chars,
        rep.removed,
    )
    return out, rep


# --- transliterate ----------------------------------------------


def transliterate(
    text: str,
    *,
    report: ReportMode = False,
) -> Union[str, Tuple[str, ConversionReport]]:
    """
    Transliterate ``text`` to ASCII, optionally with its statistics.

    :param report: ``False`` returns only the ASCII text; ``True`` also returns
        the :class:`ConversionReport`; ``"detail"`` fills its substitution and
        dropped-codepoint fields as well.
    """
    out, rep = convert_with_report(text, detail=report == "detail")
    return (out, rep) if report in (True, "detail") else out


def transliterate_lines(lines: Iterable[str], **kwargs: Any) -> List[str]:
    """
    Convert an iterable of strings with
    :func:`~asciipraline.cleaner.clean.transliterate`.

    :param lines: Iterable of strings.
    :param kwargs: Forwarded to :func:`~asciipraline.cleaner.clean.transliterate`.
    :returns: List of converted strings.
    """
    out: List[str] = []
    for x in lines:
        res = transliterate(x, **kwargs)
        out.append(res if isinstance(res, str) else res[0])
    return out
