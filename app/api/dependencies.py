"""
app/api/dependencies.py

Purpose: Request-scoped access to startup resources

- The Database, MessageStore and SMS client live on app.state
- Routes receive them through FastAPI dependencies
"""

from fastapi import Depends, Request

from app.core.exceptions import PersistenceError
from app.db.database import Database
from app.db.message_store import MessageStore
from app.services.submission_service import SubmissionWorkflow


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise PersistenceError("Database not initialized")
    return database


def get_store(database: Database = Depends(get_database)) -> MessageStore:
    return MessageStore(database)


def get_workflow(request: Request, store: MessageStore = Depends(get_store)) -> SubmissionWorkflow:
    return SubmissionWorkflow(store, getattr(request.app.state, "sms_client", None))
