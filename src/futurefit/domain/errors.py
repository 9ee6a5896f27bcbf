"""Domain errors."""


class FutureFitError(Exception):
    """Base class for domain errors."""


class ValidationError(FutureFitError):
    """Raised when a profile or scan field is malformed or out of range."""

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"Invalid {field}: {detail}")
        self.field = field
        self.detail = detail


class InvalidGoal(FutureFitError):
    """Raised when a goal is outside the supported set."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid goal specified: {value!r}")
        self.value = value


class ProfileNotFound(FutureFitError):
    """Raised when no profile is stored for a user."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No profile for user {user_id}")
        self.user_id = user_id


class EstimationError(FutureFitError):
    """Base class for failures inside the body-fat estimation pipeline."""


class DetectionFailed(EstimationError):
    """Raised when a landmark provider cannot process an image."""


class MissingHipMeasurement(EstimationError):
    """Raised when a female measurement set has no hip circumference."""

    def __init__(self) -> None:
        super().__init__("Hip measurement required for female body fat calculation")


class InvalidMeasurement(EstimationError):
    """Raised when measurements fall outside the formula's domain."""
