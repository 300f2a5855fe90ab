"""Room update log repository."""

from typing import List, Optional, Tuple

from hotel_client.db.executor import Row
from hotel_client.repositories.base_repository import BaseRepository

# SQLite's CURRENT_TIMESTAMP has whole-second resolution; these keep
# milliseconds and never move a row's time backwards or leave it unchanged.
_SQLITE_NOW = "strftime('%Y-%m-%d %H:%M:%f', 'now')"
_SQLITE_NEXT = (
    "strftime('%Y-%m-%d %H:%M:%f', "
    "MAX(julianday('now'), julianday(updatedon) + 0.002 / 86400.0))"
)
_POSTGRES_NOW = "LOCALTIMESTAMP"
_POSTGRES_NEXT = "GREATEST(LOCALTIMESTAMP, updatedon + INTERVAL '1 microsecond')"


class RoomUpdateLogRepository(BaseRepository):
    """Statements on the ``roomupdateslog`` table."""

    def _clock(self) -> Tuple[str, str]:
        """SQL for the current time and for the next time of an existing row."""
        if self.session.dialect_name == "sqlite":
            return _SQLITE_NOW, _SQLITE_NEXT
        return _POSTGRES_NOW, _POSTGRES_NEXT

    def touch(self, manager_id: int, hotel_id: int, room_number: int) -> int:
        """Move the update time of the (manager, hotel, room) row to now."""
        _, next_time = self._clock()
        return self.executor.execute_update(
            f"UPDATE roomupdateslog SET updatedon = {next_time} "
            "WHERE managerid = :manager_id AND hotelid = :hotel_id AND roomnumber = :room_number",
            {"manager_id": manager_id, "hotel_id": hotel_id, "room_number": room_number},
        )

    def create(self, manager_id: int, hotel_id: int, room_number: int) -> int:
        now, _ = self._clock()
        return self.executor.execute_update(
            "INSERT INTO roomupdateslog (managerid, hotelid, roomnumber, updatedon) "
            f"VALUES (:manager_id, :hotel_id, :room_number, {now})",
            {"manager_id": manager_id, "hotel_id": hotel_id, "room_number": room_number},
        )

    def get_timestamp(self, manager_id: int, hotel_id: int, room_number: int) -> Optional[str]:
        rows = self.executor.execute_materialize(
            "SELECT MAX(updatedon) FROM roomupdateslog "
            "WHERE managerid = :manager_id AND hotelid = :hotel_id AND roomnumber = :room_number",
            {"manager_id": manager_id, "hotel_id": hotel_id, "room_number": room_number},
        )
        return self._first_value(rows)

    def recent_for_manager(self, manager_id: int, limit: int) -> List[Row]:
        """``[updatenumber, hotelid, roomnumber, updatedon]``, newest first."""
        return self.executor.execute_materialize(
            "SELECT updatenumber, hotelid, roomnumber, updatedon FROM roomupdateslog "
            "WHERE managerid = :manager_id ORDER BY updatedon DESC, updatenumber DESC LIMIT :limit",
            {"manager_id": manager_id, "limit": limit},
        )
