from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ImportRequest(BaseModel):
    text: str = Field(..., description="Raw JSON or CSV flashcard text")
    file_name: str = Field(..., description="Originating file name, used for defaults")
    format: Literal["json", "csv"] | None = Field(
        default=None, description="Input format; detected from file_name when omitted"
    )


class ImportErrorDetail(BaseModel):
    code: str
    message: str
