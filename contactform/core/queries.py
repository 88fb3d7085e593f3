"""Parameterized statements over the contact table."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Column, Delete, Insert, Integer, MetaData, Select, String, Table, Update

from contactform.core.config import settings

# Insert/update column order
CONTACT_FIELDS = ("name", "email", "phone", "location", "dob")

metadata = MetaData()


def build_contact_table(name: str, target: MetaData = metadata) -> Table:
    """Describe the externally owned contact table."""

    return Table(
        name,
        target,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(255)),
        Column("email", String(255)),
        Column("phone", String(20)),
        Column("location", String(255)),
        Column("dob", String(10)),
    )


contacts = build_contact_table(settings.CONTACT_TABLE)


def _field_values(values: Mapping[str, Any]) -> dict:
    return {column: values.get(column) for column in CONTACT_FIELDS}


def insert_contact(values: Mapping[str, Any], table: Table = contacts) -> Insert:
    return table.insert().values(**_field_values(values))


def select_contacts(table: Table = contacts) -> Select:
    return table.select().order_by(table.c.id)


def select_contact(contact_id: Any, table: Table = contacts) -> Select:
    # The id is bound as-is; a value matching no row simply yields no rows.
    return table.select().where(table.c.id == contact_id)


def update_contact(contact_id: Any, values: Mapping[str, Any], table: Table = contacts) -> Update:
    return table.update().where(table.c.id == contact_id).values(**_field_values(values))


def delete_contact(contact_id: Any, table: Table = contacts) -> Delete:
    return table.delete().where(table.c.id == contact_id)
