"""Repair ticket and request schemas."""

from hotel_client.schemas.base import BaseSchema

__all__ = ["RepairRequest"]


class RepairRequest(BaseSchema):
    """A repair ticket together with the manager request linking to it."""

    ticket_id: int
    manager_id: int
    company_id: int
    hotel_id: int
    room_number: int
