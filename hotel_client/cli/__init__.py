"""
Terminal front end: input handling and menus.
"""

from hotel_client.cli.input_source import InputSource
from hotel_client.cli.menu import HotelMenu

__all__ = ["InputSource", "HotelMenu"]
