"""Loosely-typed models for decoded JSON import documents.

``json.loads`` produces an untyped document; these models are the second
decode step and only check what the importer needs. Unknown keys are ignored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter


class CardEntry(BaseModel):
    """One card as it appears in an import document."""

    model_config = ConfigDict(extra="ignore")

    question: StrictStr
    answer: StrictStr
    id: Any = None

    @property
    def supplied_id(self) -> str | None:
        if isinstance(self.id, str) and self.id:
            return self.id
        return None


# ISO-8601 strings (with "Z") and Unix timestamps
created_at_adapter: TypeAdapter[datetime] = TypeAdapter(datetime)
