# errors.py


class TeenPattiError(Exception):
    """Base class for game errors."""
    pass


class InvalidSelectionError(TeenPattiError, ValueError):
    """Raised when the chosen winner is not one of A, B or C."""

    def __init__(self, value: str):
        super().__init__(f"Invalid input: {value}. Please select one of A, B, or C.")
        self.value = value


class RedealLimitExceeded(TeenPattiError, RuntimeError):
    """Raised when no natural winner turns up within the redeal budget."""

    def __init__(self, attempts: int):
        super().__init__(f"no natural winner after {attempts} deals")
        self.attempts = attempts
