"""
Notes API — Notes Route Handlers
==================================

What:  CRUD endpoints under /api/notes.
How:   Thin handlers: pull the path id and raw body from the request, call
       NoteService, wrap the result in a response model. All failures are
       application exceptions handled globally in main.py.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response

from notes_api.schemas.note import ErrorResponse, NoteResponse
from notes_api.services.note_service import NoteService
from notes_api.store import NoteStore

router = APIRouter(prefix="/api", tags=["Notes"])


def get_store(request: Request) -> NoteStore:
    """The store owned by the running application instance."""
    return request.app.state.store


def get_note_service(store: NoteStore = Depends(get_store)) -> NoteService:
    return NoteService(store)


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note in creation order. No filtering or pagination.",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return [NoteResponse.from_note(n) for n in service.list_notes()]


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=201,
    responses={
        400: {"description": "Missing fields or malformed body", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    body = await request.body()
    return NoteResponse.from_note(service.create_note(body))


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return NoteResponse.from_note(service.get_note(note_id))


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Missing fields or malformed body", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace a note's title and content",
)
async def update_note(
    note_id: str,
    request: Request,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.update_note(note_id, request.body)
    return NoteResponse.from_note(note)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete_note(note_id)
    return Response(status_code=204)
