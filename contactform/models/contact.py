"""Contact data model definitions."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class ContactPayload(BaseModel):
    """Form submission body shared by create and update.

    Every field is optional at the schema level; create-time rules decide
    what is acceptable so that callers get the service's own messages.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    dob: Optional[str] = None


class Contact(BaseModel):
    """Stored row as served by the externally owned table.

    Column types vary by schema: numeric phone columns are rendered as
    strings and dob may be a DATE, DATETIME or text column.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    dob: Optional[Union[datetime, date, str]] = None


class ContactCreated(BaseModel):
    id: Optional[int]
    message: str = "Contact added successfully"
