"""Base exception shared by every goldhunt module."""


class GoldHuntError(Exception):
    """Base class for all goldhunt errors."""
