"""
Maintenance services.
"""

from hotel_client.services.maintenance.repair_service import RepairService

__all__ = ["RepairService"]
