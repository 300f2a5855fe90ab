"""
Configuration package for the hotel client.

Contains the environment settings and the logging setup.
"""

from hotel_client.config.settings import Settings, get_settings, settings
from hotel_client.config.logging import setup_logging, get_logger

__all__ = ['Settings', 'get_settings', 'settings', 'setup_logging', 'get_logger']
