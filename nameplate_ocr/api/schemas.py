"""Pydantic request/response schemas for the FastAPI endpoints."""

from pydantic import BaseModel, Field

from nameplate_ocr.extraction.fields import FieldSpec


class ExtractionRequest(BaseModel):
    """Request schema for extracting fields from one OCR text."""

    text: str
    fields: list[FieldSpec] | None = Field(
        default=None,
        description="Fields to extract; the configured fields when omitted",
    )


class BatchExtractionRequest(BaseModel):
    """Request schema for extracting fields from several OCR texts."""

    texts: list[str] = Field(min_length=1)
    fields: list[FieldSpec] | None = None


class FieldValueResponse(BaseModel):
    """Response schema for a single resolved field."""

    key: str
    value: str | None
    found: bool
    method: str
    pattern: str | None = None
    line_index: int | None = None


class ExtractionResponse(BaseModel):
    """Response schema for an extraction request."""

    fields: list[FieldValueResponse]
    values: dict[str, str]
    summary: str
    found_count: int
    processing_time_ms: float


class BatchExtractionResponse(BaseModel):
    """Response schema for batch extraction of several texts."""

    total_documents: int
    results: list[ExtractionResponse]


class FieldsResponse(BaseModel):
    """Response schema listing the configured fields."""

    fields: list[FieldSpec]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    field_count: int
