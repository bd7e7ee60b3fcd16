"""Contact form endpoints.

POST /contact                      -- public submission, status "new"
GET  /admin/contacts               -- admin listing, newest first
PUT  /admin/contacts/{id}/status   -- admin status change
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from app.models.contact import Contact, ContactCreate, ContactStatusUpdate
from app.routers.deps import client_ip
from app.services.contacts import create_contact, list_contacts, update_contact_status

router = APIRouter()
admin_router = APIRouter()


@router.post("/contact", response_model=Contact, status_code=201)
def submit_contact(
    body: ContactCreate,
    request: Request,
    ip_address: str | None = Depends(client_ip),
) -> Contact:
    return create_contact(
        body,
        ip_address=ip_address,
        user_agent=request.headers.get("user-agent"),
    )


@admin_router.get("/contacts", response_model=list[Contact])
def read_contacts() -> list[Contact]:
    return list_contacts()


@admin_router.put("/contacts/{contact_id}/status", response_model=Contact)
def change_contact_status(contact_id: int, body: ContactStatusUpdate) -> Contact:
    return update_contact_status(contact_id, body.status)
