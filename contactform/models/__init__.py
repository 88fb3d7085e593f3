from .contact import Contact, ContactCreated, ContactPayload

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactPayload",
]
