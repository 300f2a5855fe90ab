"""
Hotel booking database client.
"""

__version__ = "1.0.0"
