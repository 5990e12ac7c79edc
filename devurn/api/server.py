from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from .. import __version__
from ..core import (
    DevUrnError,
    ErrorKind,
    SubtypeDescriptor,
    UnknownSubtypeError,
    breakdown,
    detect,
    generate,
    list_subtypes,
    lookup,
    validate,
)
from ..core.normalize import trim_input
from .schemas import (
    BreakdownRequest,
    BreakdownResponse,
    DetectRequest,
    DetectResponse,
    GenerateResponse,
    IdentifierRequest,
    SubtypeInfo,
    SubtypeListResponse,
    ValidateResponse,
)
from .settings import ServerSettings


logger = logging.getLogger(__name__)

_EXAMPLE_MAC = "00:1B:44:11:3A:B7"


def _subtype_info(descriptor: SubtypeDescriptor) -> SubtypeInfo:
    return SubtypeInfo(**descriptor.to_dict())


def _reject(kind: ErrorKind, message: str, **context: str) -> HTTPException:
    detail = {"error": kind.value, "message": message, **context}
    return HTTPException(status_code=400, detail=detail)


def _require_subtype(subtype: str) -> SubtypeDescriptor:
    descriptor = lookup(subtype)
    if descriptor is None:
        logger.info("Rejected request for unknown subtype=%s", subtype)
        raise _reject(
            ErrorKind.UNKNOWN_SUBTYPE, f"Invalid subtype: {subtype}", subtype=subtype
        )
    return descriptor


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    active = (settings or ServerSettings()).sanitized()
    policy = active.detection.to_policy()

    app = FastAPI(title="DEV URN Generator API", version=__version__)
    app.state.settings = active
    app.state.detection_policy = policy

    logger.info(
        "API server initialised bare_eui64=%s two_segment=%s",
        policy.bare_eui64_subtype,
        policy.two_segment_subtype,
    )

    @app.get("/health", response_model=dict[str, str])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/v1")
    def api_index() -> dict[str, Any]:
        return {
            "name": "DEV URN Generator API",
            "version": __version__,
            "description": (
                "REST API for generating and validating Device Identifier URNs "
                "according to RFC 9039"
            ),
            "rfc": "RFC 9039",
            "namespace": "urn:dev",
            "endpoints": {
                "/v1/subtypes": {
                    "method": "GET",
                    "description": "List all supported DEV URN subtypes",
                },
                "/v1/detect": {
                    "method": "POST",
                    "description": "Auto-detect subtype from device identifier",
                    "body": {"input": "string"},
                },
                "/v1/validate": {
                    "method": "POST",
                    "description": "Validate a device identifier for a specific subtype",
                    "body": {"subtype": "string", "input": "string"},
                },
                "/v1/generate": {
                    "method": "POST",
                    "description": "Generate a DEV URN from device identifier",
                    "body": {"subtype": "string", "input": "string"},
                },
                "/v1/breakdown": {
                    "method": "POST",
                    "description": "Split a DEV URN into its components",
                    "body": {"urn": "string"},
                },
            },
            "examples": {
                "detectMac": {"url": "/v1/detect", "body": {"input": _EXAMPLE_MAC}},
                "validateMac": {
                    "url": "/v1/validate",
                    "body": {"subtype": "mac", "input": _EXAMPLE_MAC},
                },
                "generateMac": {
                    "url": "/v1/generate",
                    "body": {"subtype": "mac", "input": _EXAMPLE_MAC},
                },
            },
        }

    @app.get("/v1/subtypes", response_model=SubtypeListResponse)
    def subtypes() -> SubtypeListResponse:
        items = [_subtype_info(descriptor) for descriptor in list_subtypes()]
        return SubtypeListResponse(subtypes=items, count=len(items))

    @app.post("/v1/detect", response_model=DetectResponse)
    def detect_subtype(request: DetectRequest) -> DetectResponse:
        detected = detect(request.input, app.state.detection_policy)
        descriptor = lookup(detected) if detected else None
        logger.debug("Detect input_len=%d detected=%s", len(request.input), detected)
        return DetectResponse(
            input=request.input,
            detected_subtype=detected,
            subtype_info=_subtype_info(descriptor) if descriptor else None,
            success=detected is not None,
        )

    @app.post("/v1/validate", response_model=ValidateResponse)
    def validate_identifier(request: IdentifierRequest) -> ValidateResponse:
        descriptor = _require_subtype(request.subtype)
        result = validate(request.subtype, request.input)
        return ValidateResponse(
            valid=result.is_valid,
            error=result.error.value if result.error else None,
            message=result.message,
            subtype=request.subtype,
            input=request.input,
            format=descriptor.format_spec,
            example=descriptor.example,
        )

    @app.post("/v1/generate", response_model=GenerateResponse)
    def generate_urn(request: IdentifierRequest) -> GenerateResponse:
        _require_subtype(request.subtype)
        try:
            urn = generate(request.subtype, request.input)
        except DevUrnError as exc:
            logger.info(
                "Generate rejected subtype=%s error=%s", request.subtype, exc.kind.value
            )
            raise _reject(exc.kind, exc.message) from exc
        logger.info("Generated urn=%s subtype=%s", urn, request.subtype)
        return GenerateResponse(
            urn=urn, subtype=request.subtype, input=trim_input(request.input)
        )

    @app.post("/v1/breakdown", response_model=BreakdownResponse)
    def breakdown_urn(request: BreakdownRequest) -> BreakdownResponse:
        try:
            parts = breakdown(request.urn)
        except DevUrnError as exc:
            logger.info("Breakdown rejected error=%s", exc.kind.value)
            context = {"urn": request.urn}
            if isinstance(exc, UnknownSubtypeError):
                context["subtype"] = exc.subtype
            raise _reject(exc.kind, exc.message, **context) from exc
        return BreakdownResponse(**parts.to_dict())

    return app


__all__ = ["create_app"]
