"""Notes API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ApiResponse, ErrorResponse
from ..core.schemas.notes import NoteResponse, NoteWrite
from ..core.services import NoteService
from ..database import get_db_session

router = APIRouter(prefix="/notes", tags=["notes"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Note not found"}}
INVALID = {422: {"model": ErrorResponse, "description": "Validation failed"}}

# The raw body is decoded and validated by the service, after the existence
# check on update. The schema is declared for the docs only.
NOTE_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": NoteWrite.model_json_schema()}},
    }
}


@router.get("", response_model=ApiResponse[List[NoteResponse]], response_model_exclude_none=True)
@router.get("/", include_in_schema=False, response_model=ApiResponse[List[NoteResponse]], response_model_exclude_none=True)
async def list_notes(session: AsyncSession = Depends(get_db_session)):
    """List all notes, newest first."""
    note_service = NoteService(session)
    return ApiResponse.ok(await note_service.list_notes())


@router.post("", response_model=ApiResponse[NoteResponse], status_code=201, responses=INVALID, openapi_extra=NOTE_BODY)
@router.post("/", include_in_schema=False, response_model=ApiResponse[NoteResponse], status_code=201)
async def create_note(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    note = await note_service.create_note(await request.body())
    return ApiResponse.ok(note, message="Note created successfully")


@router.get("/{note_id}", response_model=ApiResponse[NoteResponse], response_model_exclude_none=True, responses=NOT_FOUND)
async def get_note(note_id: str, session: AsyncSession = Depends(get_db_session)):
    """Get a specific note."""
    note_service = NoteService(session)
    return ApiResponse.ok(await note_service.get_note(note_id))


@router.put("/{note_id}", response_model=ApiResponse[NoteResponse], responses={**NOT_FOUND, **INVALID}, openapi_extra=NOTE_BODY)
async def update_note(
    note_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db_session),
):
    """Replace a note's title and content."""
    note_service = NoteService(session)
    note = await note_service.update_note(note_id, await request.body())
    return ApiResponse.ok(note, message="Note updated successfully")


@router.delete("/{note_id}", response_model=ApiResponse[None], response_model_exclude_none=True, responses=NOT_FOUND)
async def delete_note(note_id: str, session: AsyncSession = Depends(get_db_session)):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id)
    return ApiResponse.ok(message="Note deleted successfully")
