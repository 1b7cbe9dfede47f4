# asciipraline/cleaner/stages.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .clean import RULES, run_rules

__all__ = [
    "Stage",
    "StepResult",
    "STAGES",
    "DEMO_SAMPLE",
    "INITIAL_TEXT",
    "get_stages",
    "apply_stage",
    "select_stage",
    "walk_stages",
]

# Explainer sample: accents, special punctuation and a non-Latin script
DEMO_SAMPLE = "Français naïve – “Ciao mondo!” — 25°...\nAltri simboli: © 中文"

# Placeholder text for the live converter
INITIAL_TEXT = (
    "Paste or type here…\n"
    "Français naïve façade – “quotes” — dashes…\n"
    "Symbols: © 2025 — 45° €100 ™\n"
    "中文, русский, عربى will be removed."
)


@dataclass(frozen=True)
class StepResult:
    text: str
    description: str


@dataclass(frozen=True)
class Stage:
    """
    One step of the explainer.

    :param ordinal: Position in :data:`STAGES` (0-6).
    :param label: Short identifier.
    :param description: Human-readable explanation of the step.
    :param depth: Number of leading :data:`~asciipraline.cleaner.clean.RULES`
        applied by :meth:`transform`.
    """

    ordinal: int
    label: str
    description: str
    depth: int

    def transform(self, text: str) -> str:
        return run_rules(text, RULES[: self.depth])

    def apply(self, text: str) -> StepResult:
        return StepResult(text=self.transform(text), description=self.description)


_FULL = len(RULES)

# (label, description, depth); stages 4-6 all run the whole pipeline and only
# differ in what the explainer says about them.
_STAGE_SPECS: Tuple[Tuple[str, str, int], ...] = (
    (
        "original",
        "Original text with accents, special punctuation and non-Latin characters.",
        0,
    ),
    (
        "decompose",
        "NFD normalization: splits letters from their diacritics (é → e + accent).",
        1,
    ),
    ("substitute", "Special punctuation replaced with ASCII.", 2),
    ("strip-marks", "Diacritics removed: only base letters remain.", 3),
    ("strip-non-ascii", "Non-ASCII characters removed (e.g. 中文).", _FULL),
    ("collapse-whitespace", "Multiple spaces normalized.", _FULL),
    ("final", "Final result: clean, ASCII-compatible text.", _FULL),
)

STAGES: Tuple[Stage, ...] = tuple(
    Stage(ordinal=i, label=label, description=desc, depth=depth)
    for i, (label, desc, depth) in enumerate(_STAGE_SPECS)
)


def get_stages() -> Tuple[Stage, ...]:
    return STAGES


def apply_stage(ordinal: int, sample: str = DEMO_SAMPLE) -> StepResult:
    """
    Apply stage ``ordinal`` to ``sample``.

    :param ordinal: Stage index, 0-6.
    :param sample: Text to transform (defaults to :data:`DEMO_SAMPLE`).
    :returns: The stage output and its description.
    :raises IndexError: If ``ordinal`` is outside 0-6.
    """
    if not 0 <= ordinal < len(STAGES):
        raise IndexError(
            f"stage ordinal {ordinal} out of range 0-{len(STAGES) - 1}"
        )
    return STAGES[ordinal].apply(sample)


def select_stage(ordinal: int) -> StepResult:
    """Explainer hook: ``apply_stage`` against the fixed demo sample."""
    return apply_stage(ordinal, DEMO_SAMPLE)


def walk_stages(sample: str = DEMO_SAMPLE) -> List[StepResult]:
    return [stage.apply(sample) for stage in STAGES]
