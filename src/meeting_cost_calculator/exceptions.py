"""Custom exceptions for Meeting Cost Calculator."""


class MeetingCostError(Exception):
    """Base exception for all Meeting Cost Calculator errors."""


class CalendarAPIError(MeetingCostError):
    """Exception raised for Google Calendar API related errors."""


class ConfigurationError(MeetingCostError):
    """Exception raised for configuration related errors."""


class AuthenticationError(MeetingCostError):
    """Exception raised for authentication failures."""


class EventFileError(MeetingCostError):
    """Exception raised when an exported events file cannot be read."""
