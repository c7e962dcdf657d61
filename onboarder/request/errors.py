"""Errors raised while decoding a request or generating its manifests."""
from typing import Optional


class OnboardingError(Exception):
    """Base class for every error that aborts a run."""
    pass


class RequestTypeError(OnboardingError):
    """Raised when an input field holds the wrong kind of value."""

    def __init__(self, path: str, expected: str, actual: str):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid type for {path}: expected {expected}, got {actual}")


class MissingDataError(OnboardingError):
    """Raised when a required field is absent or empty."""

    def __init__(self, field: Optional[str] = None):
        self.field = field
        message = "missing data" if field is None else f"missing data: {field}"
        super().__init__(message)


class IllegalCharacterError(OnboardingError):
    """Raised when a forbidden character appears in a name field."""
    pass


class IllegalSpacesError(IllegalCharacterError):
    def __init__(self):
        super().__init__("data contains illegal spaces")


class IllegalUnderscoresError(IllegalCharacterError):
    def __init__(self):
        super().__init__("data contains illegal underscores")


class InvalidEnumerationError(OnboardingError):
    """Raised when an optional's name or unit is not a permitted value."""

    def __init__(self, message: str, value: str):
        self.value = value
        super().__init__(message)


class InvalidNameError(InvalidEnumerationError):
    def __init__(self, value: str):
        super().__init__(f"optional name entry is invalid: {value}", value)


class InvalidUnitError(InvalidEnumerationError):
    def __init__(self, value: str):
        super().__init__(f"optional unit entry is invalid: {value}", value)


class MissingUnitError(OnboardingError):
    """Raised when memory or storage is requested without a unit."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid or missing unit for: {name}")


class ConfigurationError(OnboardingError):
    """Raised when a role does not map to a cluster role."""
    pass


class SerializationError(OnboardingError):
    """Raised when a manifest cannot be encoded."""
    pass


class MalformedRequestError(OnboardingError):
    """Raised when the request file is not parseable JSON or YAML."""
    pass
