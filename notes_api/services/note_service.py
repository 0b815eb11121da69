"""
Notes API — Note Service (Business Logic)
===========================================

What:  The five note operations plus request-body parsing and validation.
How:   Wraps a NoteStore. Routes hand over path ids and raw body bytes; the
       service turns them into store calls or raises one of the application
       exceptions, which the boundary handler in main.py converts to HTTP.
Who:   Constructed per request by the `get_note_service` dependency.

Body validation order (create and update):
    1. Not JSON, or not a JSON object       → MalformedRequestError
    2. title or content absent / falsy      → ValidationError
    3. title or content truthy, not a str   → MalformedRequestError

Update checks that the note exists before reading the body at all.
"""

import json
import logging
from typing import Any, Awaitable, Callable, List

from pydantic import ValidationError as PydanticValidationError

from notes_api.exceptions import MalformedRequestError, ValidationError
from notes_api.models.note import Note
from notes_api.schemas.note import NotePayload
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)


def parse_note_payload(body: bytes) -> NotePayload:
    """
    Decode and validate a create/update request body.

    Args:
        body: Raw request body bytes

    Returns:
        NotePayload with non-empty string title and content

    Raises:
        MalformedRequestError: body is not a JSON object of the right shape
        ValidationError: title or content is missing or falsy
    """
    try:
        data: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from arrays/objects nested too deeply to decode
        logger.warning("Rejected unparseable request body: %s", e)
        raise MalformedRequestError(context={"reason": str(e)})

    if not isinstance(data, dict):
        logger.warning("Rejected request body of type %s", type(data).__name__)
        raise MalformedRequestError(context={"reason": f"expected object, got {type(data).__name__}"})

    for field in ("title", "content"):
        if not data.get(field):
            raise ValidationError(field=field)

    try:
        return NotePayload.model_validate(data)
    except PydanticValidationError as e:
        logger.warning("Rejected request body with non-string fields: %s", e.error_count())
        raise MalformedRequestError(context={"errors": e.errors(include_url=False)})


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes / get_note: read access
        - create_note / update_note: body parsing, validation, write
        - delete_note: removal with not-found detection
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def list_notes(self) -> List[Note]:
        return self.store.list()

    def get_note(self, note_id: str) -> Note:
        """
        Raises:
            NotFoundError: no note has this id (→ 404)
        """
        return self.store.get(note_id)

    def create_note(self, body: bytes) -> Note:
        payload = parse_note_payload(body)
        note = self.store.create(title=payload.title, content=payload.content)
        logger.info("Note %s created", note.id)
        return note

    async def update_note(
        self, note_id: str, read_body: Callable[[], Awaitable[bytes]]
    ) -> Note:
        """
        Full replacement of title and content.

        Args:
            note_id:   Id of the note to replace
            read_body: Coroutine function returning the raw body (e.g.
                       `request.body`); only awaited once the note is found

        Raises:
            NotFoundError: checked first, before the body is read
            MalformedRequestError / ValidationError: as for create
        """
        # 404 wins over a bad body, so look the note up before reading it
        self.store.get(note_id)
        payload = parse_note_payload(await read_body())
        note = self.store.update(note_id, title=payload.title, content=payload.content)
        logger.info("Note %s updated", note.id)
        return note

    def delete_note(self, note_id: str) -> None:
        self.store.delete(note_id)
        logger.info("Note %s deleted", note_id)
