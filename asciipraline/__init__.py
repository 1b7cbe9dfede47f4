"""
asciipraline: deterministic Unicode → ASCII sanitization.
"""

from .cleaner.clean import (
    ConversionReport,
    convert,
    convert_with_report,
    is_ascii,
    transliterate,
    transliterate_lines,
)
from .cleaner.stages import (
    DEMO_SAMPLE,
    INITIAL_TEXT,
    Stage,
    StepResult,
    apply_stage,
    get_stages,
    select_stage,
    walk_stages,
)

__version__ = "0.1.0"

__all__ = [
    "convert",
    "convert_with_report",
    "transliterate",
    "transliterate_lines",
    "is_ascii",
    "ConversionReport",
    "Stage",
    "StepResult",
    "get_stages",
    "apply_stage",
    "select_stage",
    "walk_stages",
    "DEMO_SAMPLE",
    "INITIAL_TEXT",
]
