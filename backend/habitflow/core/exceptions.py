"""
Custom Exceptions - Application-specific error types
"""


class HabitTrackerException(Exception):
    """Base exception for all habit tracker errors"""
    pass


class NotAuthenticatedError(HabitTrackerException):
    """Raised when a mutating call is made without a user id"""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class HabitNotFoundError(HabitTrackerException):
    """Raised when a habit cannot be found"""
    pass


class InvalidDataError(HabitTrackerException):
    """Raised when request data fails validation"""
    pass


class InvalidHabitDataError(InvalidDataError):
    """Raised when habit data validation fails"""
    pass


class InvalidProfileDataError(InvalidDataError):
    """Raised when profile data validation fails"""
    pass


class InvalidLogDateError(InvalidDataError):
    """Raised when a completion is toggled outside the loaded window of days"""
    pass


class ProfileNotFoundError(HabitTrackerException):
    """Raised when no profile row exists for a user"""
    pass


class RemoteStoreError(HabitTrackerException):
    """Raised when a Supabase call fails (network, validation, conflict)"""
    pass


class SerializationError(HabitTrackerException):
    """Raised when cached data cannot be written or produced unparseable data"""
    pass
