"""Contact form service.

Submissions are written by anyone and only read or re-labelled by an
admin.  Nothing here is cached.
"""

from __future__ import annotations

import logging

from app.core.constants import CONTACT_STATUS_NEW, TABLE_CONTACTS
from app.core.errors import NotFoundError
from app.db import store
from app.models.contact import Contact, ContactCreate

logger = logging.getLogger(__name__)


def create_contact(
    payload: ContactCreate,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> Contact:
    data = payload.model_dump(mode="json")
    data.update(
        status=CONTACT_STATUS_NEW,
        ip_address=ip_address or "",
        user_agent=user_agent or "",
    )
    row = store.insert_row(TABLE_CONTACTS, data)
    logger.info(
        "contact_received",
        extra={"contact_id": row["id"], "ip_address": ip_address},
    )
    return Contact.model_validate(row)


def list_contacts() -> list[Contact]:
    rows = store.select_rows(TABLE_CONTACTS, order=[("created_at", True)])
    return [Contact.model_validate(row) for row in rows]


def update_contact_status(contact_id: int, status: str) -> Contact:
    """Set the free-text status of a submission (e.g. read, replied)."""
    row = store.update_row(TABLE_CONTACTS, contact_id, {"status": status})
    if row is None:
        raise NotFoundError("Contact not found")
    logger.info(
        "contact_status_updated",
        extra={"contact_id": contact_id, "status": status},
    )
    return Contact.model_validate(row)
