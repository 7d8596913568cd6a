"""Exception hierarchy for duration string parsing."""


class DurationStringError(ValueError):
    """Base exception for rejected durations.

    ``str()`` is the fixed message for the failure kind, safe to show to
    users or compare in tests. ``internal()`` names the offending group
    and input text. ``wrapped`` holds the lower-level cause, if any.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class FormatError(DurationStringError):
    """Raised when input has no valid number+unit decomposition."""


class DurationOverflowError(DurationStringError):
    """Raised when a duration exceeds the representable range."""


class IntegerParseError(DurationStringError):
    """Raised when a numeric field is not a valid unsigned 64-bit integer."""


# User-facing error message constants
ERR_MSG_FORMAT = "missing time duration format, must be multiples of `[0-9]+(ns|us|ms|[smhdwy])`"
ERR_MSG_OVERFLOW = "number is too large to fit in target type"
ERR_MSG_INT_TOO_LARGE = "number too large to fit in target type"
ERR_MSG_INVALID_DIGIT = "invalid digit found in string"
ERR_MSG_NEGATIVE = "duration cannot be negative"
