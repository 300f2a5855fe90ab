"""
Room update workflow for hotel managers.

Each (manager, hotel, room) triple owns one row in ``roomupdateslog``
holding the time of its latest update.
"""

from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from hotel_client.config.settings import Settings
from hotel_client.core.exceptions import DatabaseError
from hotel_client.db.executor import StatementExecutor
from hotel_client.repositories.room_repository import RoomRepository
from hotel_client.repositories.room_update_log_repository import RoomUpdateLogRepository
from hotel_client.schemas.room import RoomInfo, RoomUpdate, RoomUpdateEntry
from hotel_client.services.auth.authorization_service import AuthorizationService
from hotel_client.services.base import BaseService, ServiceResult


class RoomUpdateService(BaseService):
    """Price and image updates with an update log."""

    def __init__(
        self,
        executor: StatementExecutor,
        settings: Optional[Settings] = None,
        authorization: Optional[AuthorizationService] = None,
    ):
        super().__init__(executor, settings)
        self.rooms = RoomRepository(executor)
        self.update_log = RoomUpdateLogRepository(executor)
        self.authorization = authorization or AuthorizationService(executor, self.settings)

    def get_room(self, manager_id: int, hotel_id: int, room_number: int) -> ServiceResult[RoomInfo]:
        """Current price and image of a room in a managed hotel."""
        try:
            rejection = self.authorization.require_hotel_manager(manager_id, hotel_id)
            if rejection is not None:
                return rejection
            row = self.rooms.get(hotel_id, room_number)
        except DatabaseError as e:
            return self._handle_exception(e, "get room", f"{hotel_id}/{room_number}")

        if row is None:
            return ServiceResult.not_found("Room", f"{hotel_id}/{room_number}")

        price, image_url = row
        return ServiceResult.success(
            RoomInfo(hotel_id=hotel_id, room_number=room_number, price=Decimal(price), image_url=image_url)
        )

    def update_room(
        self,
        manager_id: int,
        hotel_id: int,
        room_number: int,
        price: Union[Decimal, int, float, str],
        image_url: Optional[str],
    ) -> ServiceResult[RoomUpdate]:
        """
        Update the price and image of a room and log the update.

        Nothing is written unless the manager manages the hotel and the room
        exists. The room update and the log upsert commit together.

        Returns:
            ServiceResult containing the stored room values and update time
        """
        try:
            price = Decimal(str(price))
        except InvalidOperation:
            return ServiceResult.validation_failure(f"Invalid price '{price}'", field="price")
        if price < 0:
            return ServiceResult.validation_failure("Price must not be negative", field="price")

        room_ref = f"{hotel_id}/{room_number}"
        extra = {
            "operation": "update_room",
            "user_id": manager_id,
            "hotel_id": hotel_id,
            "room_number": room_number,
        }
        try:
            rejection = self.authorization.require_hotel_manager(manager_id, hotel_id)
            if rejection is not None:
                return rejection

            with self.transaction():
                if self.rooms.get(hotel_id, room_number) is None:
                    return ServiceResult.not_found("Room", room_ref)

                self.rooms.update(hotel_id, room_number, price, image_url)
                if self.update_log.touch(manager_id, hotel_id, room_number) == 0:
                    self.update_log.create(manager_id, hotel_id, room_number)

                stored_price, stored_image_url = self.rooms.get(hotel_id, room_number)
                updated_on = self.update_log.get_timestamp(manager_id, hotel_id, room_number)
        except DatabaseError as e:
            return self._handle_exception(e, "update room", room_ref)

        self._logger.info(f"Room {room_ref} updated by manager {manager_id}", extra=extra)
        return ServiceResult.success(
            RoomUpdate(
                hotel_id=hotel_id,
                room_number=room_number,
                manager_id=manager_id,
                price=Decimal(stored_price),
                image_url=stored_image_url,
                updated_on=updated_on,
            ),
            message="Room information updated",
        )

    def recent_updates(self, manager_id: int, limit: Optional[int] = None) -> ServiceResult[List[RoomUpdateEntry]]:
        """The manager's latest room updates, newest first."""
        limit = limit or self.settings.RECENT_LIMIT
        try:
            rows = self.update_log.recent_for_manager(manager_id, limit)
        except DatabaseError as e:
            return self._handle_exception(e, "list recent updates", manager_id)

        return ServiceResult.success(
            [
                RoomUpdateEntry(
                    update_number=update_number,
                    hotel_id=hotel_id,
                    room_number=room_number,
                    updated_on=updated_on,
                )
                for update_number, hotel_id, room_number, updated_on in rows
            ]
        )
