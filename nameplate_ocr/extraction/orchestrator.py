"""Extraction pipeline tying line normalization and field matching together.

Runs every configured field against the same normalized lines and
renders the result as a ``key: value`` summary.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from nameplate_ocr.utils.config import ExtractionConfig
from nameplate_ocr.utils.logger import get_logger

from .field_matcher import FieldMatcher, FieldValue
from .fields import DEFAULT_FIELDS, FieldSpec, validate_field_keys
from .line_normalizer import normalize_lines

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Resolved values keyed by field, in configuration order."""

    values: dict[str, FieldValue] = field(default_factory=dict)

    @property
    def found_count(self) -> int:
        return sum(1 for v in self.values.values() if v.found)

    def as_dict(self, not_found_label: str = "Not found") -> dict[str, str]:
        """Flatten to display strings, substituting the not-found label."""
        return {key: v.display(not_found_label) for key, v in self.values.items()}


def render_summary(
    values: Mapping[str, FieldValue], not_found_label: str = "Not found"
) -> str:
    """Render ``key: value`` lines joined by newlines.

    Args:
        values: Field values in the order they should appear.
        not_found_label: Text shown for fields without a value.

    Returns:
        The summary string.
    """
    return "\n".join(
        f"{key}: {v.display(not_found_label)}" for key, v in values.items()
    )


class FieldExtractor:
    """Extracts configured fields from raw OCR text.

    Instances hold only read-only configuration, so a single extractor can
    be shared between threads and requests.

    Args:
        config: Extraction settings (punctuation set, not-found label).
        fields: Field list used when ``extract`` receives none. Defaults to
            the model name, model number, and serial number fields.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        fields: Sequence[FieldSpec] | None = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.matcher = FieldMatcher(
            self.config.strip_chars, self.config.keep_inner_hyphens
        )
        self.fields: tuple[FieldSpec, ...] = (
            DEFAULT_FIELDS if fields is None else tuple(fields)
        )
        validate_field_keys(self.fields)

    def extract(
        self, raw_text: str, specs: Sequence[FieldSpec] | None = None
    ) -> tuple[ExtractionResult, str]:
        """Extract field values from OCR text.

        Args:
            raw_text: Text returned by the OCR engine.
            specs: Fields to extract. Defaults to the extractor's fields.

        Returns:
            Tuple of (structured result, summary string).

        Raises:
            ValueError: If ``specs`` contains duplicate keys.
        """
        if specs is None:
            specs = self.fields
        else:
            validate_field_keys(specs)

        lines = normalize_lines(raw_text)
        result = ExtractionResult(
            {spec.key: self.matcher.match(spec, lines) for spec in specs}
        )
        summary = render_summary(result.values, self.config.not_found_label)

        logger.info(
            "Extracted %d/%d fields from %d lines",
            result.found_count,
            len(result.values),
            len(lines),
        )
        return result, summary


def extract(
    specs: Sequence[FieldSpec], raw_text: str
) -> tuple[ExtractionResult, str]:
    """Extract ``specs`` from ``raw_text`` with default settings."""
    return FieldExtractor().extract(raw_text, specs)
