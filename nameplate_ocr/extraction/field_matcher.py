"""Keyword-based field matching over normalized OCR lines.

Finds the first line containing one of a field's alias patterns, strips
the alias and separator punctuation from it, and falls back to the
following line when nothing is left.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from nameplate_ocr.utils.logger import get_logger

from .fields import FieldSpec

logger = get_logger(__name__)

DEFAULT_STRIP_CHARS = ":=-|"

# A hyphen not flanked by word characters on both sides is a separator.
_LOOSE_HYPHEN_RE = re.compile(r"(?<!\w)-|-(?!\w)")


@dataclass(frozen=True)
class FieldValue:
    """Value resolved for one field, or the not-found outcome."""

    value: str | None = None
    pattern: str | None = None
    line_index: int | None = None
    method: str = "missing"

    @property
    def found(self) -> bool:
        return self.value is not None

    def display(self, not_found_label: str) -> str:
        """Return the value, or ``not_found_label`` when missing."""
        return self.value if self.value is not None else not_found_label


NOT_FOUND = FieldValue()


class FieldMatcher:
    """Resolves a single field against a sequence of OCR lines.

    Args:
        strip_chars: Separator characters removed from an inline value.
        keep_inner_hyphens: Keep a hyphen joining two word characters
            (``99-AB-221``) even when ``-`` is in ``strip_chars``.
    """

    def __init__(
        self, strip_chars: str = DEFAULT_STRIP_CHARS, keep_inner_hyphens: bool = True
    ) -> None:
        self.strip_chars = strip_chars
        self.keep_inner_hyphens = keep_inner_hyphens and "-" in strip_chars
        if self.keep_inner_hyphens:
            strip_chars = strip_chars.replace("-", "")
        self._strip_table = str.maketrans("", "", strip_chars)

    def match(self, spec: FieldSpec, lines: Sequence[str]) -> FieldValue:
        """Find the value of ``spec`` in ``lines``.

        Lines are scanned in order and, for each line, patterns in their
        configured order; the earliest line containing any pattern wins.

        Args:
            spec: Field to resolve.
            lines: Normalized OCR lines.

        Returns:
            The resolved value, or ``NOT_FOUND``.
        """
        hit = self._find_first(spec, lines)
        if hit is None:
            logger.debug("Field '%s': no pattern matched", spec.key)
            return NOT_FOUND

        index, pattern = hit
        candidate = self._strip_pattern(lines[index], pattern)
        if candidate:
            logger.debug(
                "Field '%s': inline value on line %d via '%s'", spec.key, index, pattern
            )
            return FieldValue(candidate, pattern, index, "inline")

        if index + 1 < len(lines):
            logger.debug(
                "Field '%s': empty inline value on line %d, using next line",
                spec.key,
                index,
            )
            return FieldValue(lines[index + 1].strip(), pattern, index, "next_line")

        logger.debug("Field '%s': label on last line has no value", spec.key)
        return NOT_FOUND

    @staticmethod
    def _find_first(
        spec: FieldSpec, lines: Sequence[str]
    ) -> tuple[int, str] | None:
        for index, line in enumerate(lines):
            lowered = line.lower()
            for pattern in spec.patterns:
                if pattern.lower() in lowered:
                    return index, pattern
        return None

    def _strip_pattern(self, line: str, pattern: str) -> str:
        remainder = re.sub(re.escape(pattern), "", line, flags=re.IGNORECASE)
        if self.keep_inner_hyphens:
            remainder = _LOOSE_HYPHEN_RE.sub("", remainder)
        return remainder.translate(self._strip_table).strip()
