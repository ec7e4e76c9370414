"""
app/api/messages.py

Purpose: Admin view of contact submissions

- Lists every submission, newest first
- Deletes a submission by id

No authentication: these routes are open to anyone who can reach the service.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import InvalidInputError, NotFoundError, PersistenceError
from app.core.logging import get_logger
from app.db.message_store import MessageStore
from app.schemas.contact import MessageListResponse, OkResponse
from app.api.dependencies import get_store
from utils.constants import INVALID_ID_MESSAGE, SERVER_ERROR_MESSAGE

logger = get_logger(__name__)
router = APIRouter()


def parse_message_id(raw: str) -> int:
    """Positive integer ids only; anything else is a client error."""
    try:
        message_id = int(raw)
    except ValueError:
        raise InvalidInputError(INVALID_ID_MESSAGE)

    if message_id <= 0:
        raise InvalidInputError(INVALID_ID_MESSAGE)

    return message_id


@router.get("/messages", response_model=MessageListResponse)
def list_messages(store: MessageStore = Depends(get_store)):
    """Returns all submissions ordered by created_at, newest first."""
    try:
        rows = store.list_all()
    except SQLAlchemyError as e:
        logger.error(f"list_messages error: {e}", exc_info=True)
        raise PersistenceError(SERVER_ERROR_MESSAGE) from e

    return MessageListResponse(data=rows)


@router.delete("/messages/{message_id}", response_model=OkResponse)
def delete_message(message_id: str, store: MessageStore = Depends(get_store)):
    """Deletes one submission by id."""
    submission_id = parse_message_id(message_id)

    try:
        deleted = store.delete(submission_id)
    except SQLAlchemyError as e:
        logger.error(f"delete_message error: {e}", exc_info=True)
        raise PersistenceError(SERVER_ERROR_MESSAGE) from e

    if not deleted:
        raise NotFoundError()

    return OkResponse()
