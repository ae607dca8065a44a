"""Filename rules for files generated by Single Take.

Single Take saves a burst of photos and clips next to the original video.
Two naming conventions have been seen in the camera folder:

    A: IMG_20240101_120000_01.jpg
    B: 20240101_120000_01.mp4

The original full video always ends in ``_99.mp4`` and is never matched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

# Extensions produced by a Single Take session
SINGLE_TAKE_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg", "mp4"})

# Suffix of the original video, kept in place
EXCLUDED_SUFFIX = "_99.mp4"

_EXT_GROUP = "(jpg|jpeg|mp4)"


class PatternVariant(Enum):
    """Naming convention used by the capture session."""

    IMG_PREFIXED = "img_prefixed"
    DATE_TIME = "date_time"

    @property
    def regex(self) -> str:
        """Inclusion regex for this variant (matched against the full name)."""
        return _PATTERNS[self]

    @property
    def label(self) -> str:
        """Short label for display."""
        return _LABELS[self]


_PATTERNS: dict[PatternVariant, str] = {
    PatternVariant.IMG_PREFIXED: rf"IMG_.*_\d{{2}}\.{_EXT_GROUP}",
    PatternVariant.DATE_TIME: rf"\d{{8}}_\d{{6}}_\d{{2}}\.{_EXT_GROUP}",
}

_LABELS: dict[PatternVariant, str] = {
    PatternVariant.IMG_PREFIXED: "A: IMG_<anything>_NN.<ext>",
    PatternVariant.DATE_TIME: "B: YYYYMMDD_HHMMSS_NN.<ext>",
}

_LETTER_ALIASES: dict[str, PatternVariant] = {
    "a": PatternVariant.IMG_PREFIXED,
    "b": PatternVariant.DATE_TIME,
}


@dataclass(frozen=True)
class ClassificationRule:
    """Inclusion pattern combined with the ``_99.mp4`` exclusion.

    Attributes:
        variant: Naming convention the rule was built for.
        pattern: Compiled inclusion regex.
        excluded_suffix: Names ending with this suffix are never matched.
    """

    variant: PatternVariant
    pattern: re.Pattern[str] = field(compare=False)
    excluded_suffix: str = EXCLUDED_SUFFIX

    @classmethod
    def for_variant(cls, variant: PatternVariant) -> ClassificationRule:
        """Build the rule for a naming convention.

        Args:
            variant: Pattern A or B.

        Returns:
            A new ClassificationRule.
        """
        return cls(variant=variant, pattern=re.compile(variant.regex))

    def includes(self, name: str) -> bool:
        """Check the inclusion pattern only."""
        return self.pattern.fullmatch(name) is not None

    def excludes(self, name: str) -> bool:
        """Check the exclusion suffix only."""
        return name.endswith(self.excluded_suffix)

    def matches(self, name: str) -> bool:
        """Return True if the file should go to the trash folder."""
        return self.includes(name) and not self.excludes(name)


def is_single_take_file(name: str, variant: PatternVariant = PatternVariant.IMG_PREFIXED) -> bool:
    """Check a single filename against the rule for ``variant``."""
    return ClassificationRule.for_variant(variant).matches(name)


def parse_variant(value: str | PatternVariant) -> PatternVariant:
    """Resolve a user supplied variant.

    Accepts the enum itself, its value, its name, or the letters A / B.

    Raises:
        ValueError: If the value names no known variant.
    """
    if isinstance(value, PatternVariant):
        return value

    key = value.strip()
    if key.lower() in _LETTER_ALIASES:
        return _LETTER_ALIASES[key.lower()]
    for variant in PatternVariant:
        if key.lower() == variant.value or key.upper() == variant.name:
            return variant

    raise ValueError(f"Unknown pattern variant: {value!r}")
