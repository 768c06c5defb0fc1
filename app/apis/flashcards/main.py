from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import settings
from app.modules.flashcards.errors import FlashcardImportError
from app.modules.flashcards.main import FlashcardImporter
from app.modules.flashcards.models import FlashcardCollection
from .schemas import ImportErrorDetail, ImportRequest


router = APIRouter()


def get_importer() -> FlashcardImporter:
    return FlashcardImporter()


Importer = Annotated[FlashcardImporter, Depends(get_importer)]


@router.post(
    f"/{settings.app.version}/flashcards/import",
    response_model=FlashcardCollection,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
    responses={
        413: {"description": "Text too large"},
        422: {"model": ImportErrorDetail},
    },
)
async def import_flashcards(req: ImportRequest, importer: Importer) -> FlashcardCollection:
    limit = settings.imports.max_text_chars
    if len(req.text) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {limit} characters",
        )
    try:
        return importer.import_text(req.text, req.file_name, req.format)
    except FlashcardImportError as exc:
        raise HTTPException(
            status_code=422,
            detail=ImportErrorDetail(code=exc.code, message=exc.message).model_dump(),
        ) from exc
