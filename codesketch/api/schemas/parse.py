"""Parse request/response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParseResponse(BaseModel):
    """Structural analysis response envelope."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether request succeeded")
    message: str = Field("", description="Status or informational message")
    result: Optional[dict] = Field(
        None, description="Structural model: classes, functions, relationships"
    )
    language_detected: Optional[str] = Field(
        None, alias="languageDetected", description="Language used for parsing"
    )
    filename: Optional[str] = Field(None, description="Uploaded filename, if any")


class DiagramResponse(BaseModel):
    """PlantUML class diagram response envelope."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether request succeeded")
    message: str = Field("", description="Status or informational message")
    plantuml: Optional[str] = Field(None, description="PlantUML source")
    language_detected: Optional[str] = Field(
        None, alias="languageDetected", description="Language used for parsing"
    )
    filename: Optional[str] = Field(None, description="Uploaded filename, if any")
