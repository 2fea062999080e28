"""Exception hierarchy for gymbuddy."""


class GymBuddyError(Exception):
    """Base exception for all gymbuddy errors."""


class PersistenceError(GymBuddyError):
    """Reading or writing the durable state slot failed."""
