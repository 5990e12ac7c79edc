from __future__ import annotations

from pydantic import BaseModel, Field


class DetectRequest(BaseModel):
    input: str = Field(..., description="Raw device identifier to classify")


class IdentifierRequest(BaseModel):
    subtype: str = Field(..., description="DEV URN subtype key (mac, ow, org, os, ops)")
    input: str = Field(..., description="Raw device identifier")


class BreakdownRequest(BaseModel):
    urn: str = Field(..., description="DEV URN to decompose")


class SubtypeInfo(BaseModel):
    subtype: str
    name: str
    description: str
    format: str
    example: str


class SubtypeListResponse(BaseModel):
    subtypes: list[SubtypeInfo]
    count: int
    rfc: str = "RFC 9039"
    namespace: str = "urn:dev"


class DetectResponse(BaseModel):
    input: str
    detected_subtype: str | None = None
    subtype_info: SubtypeInfo | None = None
    success: bool


class ValidateResponse(BaseModel):
    valid: bool
    error: str | None = None
    message: str | None = None
    subtype: str
    input: str
    format: str
    example: str


class GenerateResponse(BaseModel):
    urn: str
    subtype: str
    input: str
    valid: bool = True


class BreakdownResponse(BaseModel):
    urn: str
    namespace: str
    subtype: str
    identifier: str
    description: str
    format: str


__all__ = [
    "BreakdownRequest",
    "BreakdownResponse",
    "DetectRequest",
    "DetectResponse",
    "GenerateResponse",
    "IdentifierRequest",
    "SubtypeInfo",
    "SubtypeListResponse",
    "ValidateResponse",
]
