"""
Source attribution domain models and schemas.

Structured mapping from care plan statements to their evidentiary sources,
plus request/response schemas for the attribution API. Field aliases keep
the wire shape the LLM is instructed to produce (section, statement,
attribution_type).

Dependencies: pydantic
System role: Attribution data structures and API contracts
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AttributionType(str, Enum):
    """Provenance category of a statement's support."""

    PATIENT_DATA = "patient_data"
    CLINICAL_REASONING = "clinical_reasoning"
    STANDARD_PRACTICE = "standard_practice"
    MIXED = "mixed"


class AttributionStatement(BaseModel):
    """One care plan statement with its supporting sources."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    statement_text: str = Field(alias="statement", description="Quoted care plan sentence")
    sources: list[str] = Field(
        default_factory=list,
        description='Source notes, e.g. "Patient Record: K+ 5.1 mEq/L"',
    )
    attribution_type: AttributionType = Field(
        default=AttributionType.CLINICAL_REASONING,
        description="Support category",
    )


class AttributionSection(BaseModel):
    """A named care plan section and its attributed statements."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    section_name: str = Field(alias="section", description="Section label")
    statements: list[AttributionStatement] = Field(default_factory=list)


class SourceAttribution(BaseModel):
    """Complete attribution document for one care plan."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sections: list[AttributionSection] = Field(default_factory=list)
    generated_at: datetime = Field(description="Completion time (UTC)")
    model_used: str = Field(description="Model identifier that produced the document")


class AttributionRequest(BaseModel):
    """Request schema for ad-hoc attribution of a care plan text."""

    care_plan_text: str = Field(min_length=1, description="Generated care plan text")
    patient_record_text: str = Field(min_length=1, description="Patient record text blob")


class CarePlanAttributionResponse(BaseModel):
    """Response schema for attribution of a stored care plan."""

    success: bool = True
    message: str
    care_plan_id: uuid.UUID
    attribution_data: SourceAttribution
