"""Field definitions for nameplate extraction.

A field is a display key plus an ordered list of alias patterns that
may introduce its value on an OCR line.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nameplate_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class FieldSpec(BaseModel):
    """A target field and its alias patterns in priority order.

    Patterns are matched as case-insensitive substrings, so a short alias
    that is contained in a longer one must be listed after it. Patterns
    are kept verbatim; surrounding spaces (``"sn "``) are part of the match.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    patterns: tuple[str, ...] = Field(min_length=1)

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("field key must not be blank")
        return value

    @field_validator("patterns")
    @classmethod
    def _patterns_not_blank(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not p.strip() for p in value):
            raise ValueError("field patterns must not be blank")
        return value

    @model_validator(mode="after")
    def _warn_shadowed_patterns(self) -> "FieldSpec":
        lowered = [p.lower() for p in self.patterns]
        for i, short in enumerate(lowered):
            for longer in lowered[i + 1 :]:
                if short != longer and short in longer:
                    logger.warning(
                        "Field '%s': pattern '%s' is listed before '%s' and will "
                        "shadow it",
                        self.key,
                        self.patterns[i],
                        longer,
                    )
        return self


DEFAULT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(key="Model Name", patterns=("model name", "model", "product")),
    FieldSpec(
        key="Model Number",
        patterns=("model number", "model no", "part number", "p/n"),
    ),
    FieldSpec(
        key="Serial Number",
        patterns=("serial number", "serial no", "s/n", "sn"),
    ),
)


def validate_field_keys(specs: Sequence[FieldSpec]) -> None:
    """Reject field lists that would produce more than one entry per key.

    Args:
        specs: Field specifications in configuration order.

    Raises:
        ValueError: If two specs share the same key.
    """
    seen: set[str] = set()
    for spec in specs:
        if spec.key in seen:
            raise ValueError(f"Duplicate field key: {spec.key!r}")
        seen.add(spec.key)
