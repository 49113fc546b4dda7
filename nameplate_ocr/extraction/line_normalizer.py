"""Line normalization for raw OCR output."""


def normalize_lines(raw_text: str) -> tuple[str, ...]:
    """Split OCR text into trimmed, non-empty lines.

    Args:
        raw_text: Text returned by the OCR engine.

    Returns:
        Lines in their original top-to-bottom order, blank lines removed.
    """
    return tuple(
        stripped for line in raw_text.splitlines() if (stripped := line.strip())
    )
