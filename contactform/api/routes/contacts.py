"""Contact form CRUD endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.sql import Executable

from contactform.api.dependencies import get_db
from contactform.core import queries
from contactform.core.database import DatabaseClient, QueryResult
from contactform.core.exceptions import NotFoundError, PersistenceError
from contactform.models import Contact, ContactCreated, ContactPayload
from contactform.validation import validate_contact

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contacts"])

NOT_FOUND = "Contact not found"


async def _execute(db: DatabaseClient, statement: Executable, failure: str) -> QueryResult:
    """Run a single statement, replacing driver errors with a public message."""

    try:
        return await db.query(statement)
    except PersistenceError as exc:
        logger.error("%s: %s", failure, exc)
        raise PersistenceError(failure) from exc


@router.post("/contact", response_model=ContactCreated, status_code=status.HTTP_201_CREATED)
async def create_contact(
    payload: Optional[ContactPayload] = None,
    db: DatabaseClient = Depends(get_db),
) -> ContactCreated:
    """Validate and store a new form submission."""

    values = (payload or ContactPayload()).model_dump()
    validate_contact(values)

    result = await _execute(db, queries.insert_contact(values), "Failed to add contact")
    return ContactCreated(id=result.insert_id)


@router.get("/contacts", response_model=List[Contact])
async def list_contacts(db: DatabaseClient = Depends(get_db)) -> List[Contact]:
    result = await _execute(db, queries.select_contacts(), "Failed to fetch contacts")
    return [Contact.model_validate(row) for row in result.rows]


@router.get("/contact/{contact_id}", response_model=Contact)
async def get_contact(contact_id: str, db: DatabaseClient = Depends(get_db)) -> Contact:
    result = await _execute(db, queries.select_contact(contact_id), "Failed to fetch contact")
    if not result.rows:
        raise NotFoundError(NOT_FOUND)
    return Contact.model_validate(result.rows[0])


@router.put("/contact/{contact_id}", response_class=PlainTextResponse)
async def update_contact(
    contact_id: str,
    payload: Optional[ContactPayload] = None,
    db: DatabaseClient = Depends(get_db),
) -> str:
    """Overwrite all five fields as submitted; update applies no field rules."""

    values = (payload or ContactPayload()).model_dump()
    result = await _execute(db, queries.update_contact(contact_id, values), "Failed to update contact")
    if result.affected_rows == 0:
        raise NotFoundError(NOT_FOUND)
    return "Contact updated successfully"


@router.delete("/contact/{contact_id}", response_class=PlainTextResponse)
async def delete_contact(contact_id: str, db: DatabaseClient = Depends(get_db)) -> str:
    result = await _execute(db, queries.delete_contact(contact_id), "Failed to delete contact")
    if result.affected_rows == 0:
        raise NotFoundError(NOT_FOUND)
    return "Contact deleted successfully"
