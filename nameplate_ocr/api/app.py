"""FastAPI application for the nameplate OCR extractor.

Provides REST endpoints for field extraction from OCR text, batch
extraction, field listing, and health checks.
"""

import time
from functools import lru_cache

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from nameplate_ocr.extraction.fields import FieldSpec
from nameplate_ocr.extraction.orchestrator import FieldExtractor
from nameplate_ocr.utils.config import AppConfig, load_config
from nameplate_ocr.utils.logger import get_logger

from .schemas import (
    BatchExtractionRequest,
    BatchExtractionResponse,
    ExtractionRequest,
    ExtractionResponse,
    FieldsResponse,
    FieldValueResponse,
    HealthResponse,
)

logger = get_logger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="Nameplate OCR Field API",
    description="Extract model and serial numbers from OCR text",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def _get_components() -> tuple[AppConfig, FieldExtractor]:
    """Load configuration and build the shared extractor.

    Returns:
        Tuple of (app_config, field_extractor).
    """
    config = load_config()
    return config, FieldExtractor(config.extraction, config.fields)


def _run_extraction(
    extractor: FieldExtractor,
    config: AppConfig,
    text: str,
    fields: list[FieldSpec] | None,
) -> ExtractionResponse:
    if len(text) > config.api.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {config.api.max_text_length} characters",
        )

    start_time = time.time()
    try:
        result, summary = extractor.extract(text, fields)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    label = config.extraction.not_found_label
    return ExtractionResponse(
        fields=[
            FieldValueResponse(
                key=key,
                value=v.value,
                found=v.found,
                method=v.method,
                pattern=v.pattern,
                line_index=v.line_index,
            )
            for key, v in result.values.items()
        ],
        values=result.as_dict(label),
        summary=summary,
        found_count=result.found_count,
        processing_time_ms=(time.time() - start_time) * 1000,
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return service health status."""
    config, _ = _get_components()
    return HealthResponse(
        status="healthy", version=VERSION, field_count=len(config.fields)
    )


@app.get("/fields", response_model=FieldsResponse)
def list_fields() -> FieldsResponse:
    """List the configured fields and their alias patterns."""
    config, _ = _get_components()
    return FieldsResponse(fields=config.fields)


@app.post("/extract", response_model=ExtractionResponse)
def extract_fields(request: ExtractionRequest) -> ExtractionResponse:
    """Extract fields from a single OCR text.

    Args:
        request: OCR text and optional field overrides.

    Returns:
        Resolved fields, flat values, and the summary string.
    """
    config, extractor = _get_components()
    return _run_extraction(extractor, config, request.text, request.fields)


@app.post("/extract/batch", response_model=BatchExtractionResponse)
def extract_batch(request: BatchExtractionRequest) -> BatchExtractionResponse:
    """Extract fields from several OCR texts with the same field list.

    Args:
        request: OCR texts and optional field overrides.

    Returns:
        One extraction result per text, in request order.
    """
    config, extractor = _get_components()
    results = [
        _run_extraction(extractor, config, text, request.fields)
        for text in request.texts
    ]
    logger.info("Batch extraction processed %d texts", len(results))
    return BatchExtractionResponse(total_documents=len(results), results=results)
