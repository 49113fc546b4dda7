"""Shared test fixtures for the nameplate OCR test suite."""

from pathlib import Path

import pytest

from nameplate_ocr.extraction.fields import DEFAULT_FIELDS, FieldSpec


@pytest.fixture
def nameplate_text() -> str:
    """OCR output of a typical appliance nameplate."""
    return (
        "ACME Appliances Inc.\n"
        "Model Name: FrostKing 3000\n"
        "\n"
        "  Model Number: FK-3000-W  \n"
        "Serial Number: 99-AB-221\n"
        "Made in USA\n"
    )


@pytest.fixture
def reference_fields() -> tuple[FieldSpec, ...]:
    """The model name, model number, and serial number fields."""
    return DEFAULT_FIELDS


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"
