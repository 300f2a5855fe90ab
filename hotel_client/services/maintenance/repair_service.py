"""
Repair workflow: managers raise repair tickets with maintenance companies.

A request is two rows: the ``roomrepairs`` ticket and the
``roomrepairrequests`` row linking the manager to it. Both are written in
one transaction, and the ticket id is read back from its sequence right
after the ticket insert.
"""

from typing import Optional

from hotel_client.config.settings import Settings
from hotel_client.core.exceptions import DatabaseError, IdentityResolutionError
from hotel_client.db.executor import StatementExecutor
from hotel_client.db.sequences import IdentityResolver, NO_VALUE
from hotel_client.repositories.repair_repository import RepairRepository
from hotel_client.repositories.room_repository import RoomRepository
from hotel_client.schemas.repair import RepairRequest
from hotel_client.services.auth.authorization_service import AuthorizationService
from hotel_client.services.base import BaseService, ServiceResult


class RepairService(BaseService):
    """Places repair requests and shows repair history."""

    def __init__(
        self,
        executor: StatementExecutor,
        settings: Optional[Settings] = None,
        authorization: Optional[AuthorizationService] = None,
    ):
        super().__init__(executor, settings)
        self.repairs = RepairRepository(executor)
        self.rooms = RoomRepository(executor)
        self.identity = IdentityResolver(executor)
        self.authorization = authorization or AuthorizationService(executor, self.settings)

    def place_repair_request(
        self,
        manager_id: int,
        hotel_id: int,
        room_number: int,
        company_id: int,
    ) -> ServiceResult[RepairRequest]:
        """
        Open a repair ticket for a room and file the manager's request.

        Returns:
            ServiceResult containing the ticket id
        """
        room_ref = f"{hotel_id}/{room_number}"
        try:
            rejection = self.authorization.require_hotel_manager(manager_id, hotel_id)
            if rejection is not None:
                return rejection
            if self.rooms.get(hotel_id, room_number) is None:
                return ServiceResult.not_found("Room", room_ref)

            with self.transaction():
                self.repairs.create_ticket(company_id, hotel_id, room_number)
                ticket_id = self.identity.current_value(self.settings.REPAIR_ID_SEQUENCE)
                if ticket_id == NO_VALUE:
                    raise IdentityResolutionError(self.settings.REPAIR_ID_SEQUENCE)
                self.repairs.create_request(manager_id, ticket_id)
        except IdentityResolutionError as e:
            return self._identity_failure(e, "repair ticket")
        except DatabaseError as e:
            return self._handle_exception(e, "place repair request", room_ref)

        self._logger.info(
            f"Repair ticket {ticket_id} opened for room {room_ref}",
            extra={
                "operation": "place_repair_request",
                "user_id": manager_id,
                "hotel_id": hotel_id,
                "room_number": room_number,
            },
        )
        return ServiceResult.success(
            RepairRequest(
                ticket_id=ticket_id,
                manager_id=manager_id,
                company_id=company_id,
                hotel_id=hotel_id,
                room_number=room_number,
            ),
            message=f"successfully created request with ID#{ticket_id}",
        )

    def repair_history(self, manager_id: int) -> ServiceResult[int]:
        """Print the repairs of every hotel the manager runs, newest first."""
        try:
            rejection = self.authorization.require_manager(manager_id)
            if rejection is not None:
                return rejection
            shown = self.repairs.print_history_for_manager(manager_id)
        except DatabaseError as e:
            return self._handle_exception(e, "list repair history", manager_id)
        return ServiceResult.success(shown)
