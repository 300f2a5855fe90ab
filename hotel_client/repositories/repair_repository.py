"""Room repair repository."""

from hotel_client.repositories.base_repository import BaseRepository


class RepairRepository(BaseRepository):
    """Statements on ``roomrepairs`` and ``roomrepairrequests``."""

    def create_ticket(self, company_id: int, hotel_id: int, room_number: int) -> int:
        return self.executor.execute_update(
            "INSERT INTO roomrepairs (companyid, hotelid, roomnumber, repairdate) "
            "VALUES (:company_id, :hotel_id, :room_number, CURRENT_DATE)",
            {"company_id": company_id, "hotel_id": hotel_id, "room_number": room_number},
        )

    def create_request(self, manager_id: int, ticket_id: int) -> int:
        return self.executor.execute_update(
            "INSERT INTO roomrepairrequests (managerid, repairid) VALUES (:manager_id, :repair_id)",
            {"manager_id": manager_id, "repair_id": ticket_id},
        )

    def print_history_for_manager(self, manager_id: int) -> int:
        return self.executor.execute_and_print(
            "SELECT repairid, companyid, hotelid, roomnumber, repairdate FROM roomrepairs "
            "WHERE hotelid IN (SELECT hotelid FROM hotel WHERE manageruserid = :manager_id) "
            "ORDER BY repairdate DESC, repairid DESC",
            {"manager_id": manager_id},
        )
