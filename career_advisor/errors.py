# career_advisor/errors.py


class CareerAdvisorError(Exception):
    """Base class for every error the services raise."""

    default_message = "Server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigError(CareerAdvisorError):
    default_message = "Missing required configuration"


class ValidationError(CareerAdvisorError):
    default_message = "All fields are required"


class DuplicateUserError(CareerAdvisorError):
    default_message = "User already exists"


class InvalidCredentialsError(CareerAdvisorError):
    # same message for unknown email and wrong password
    default_message = "Invalid credentials"


class StoreError(CareerAdvisorError):
    default_message = "Store error"

    def __init__(self, message=None, integrity=False):
        super().__init__(message)
        self.integrity = integrity


class GenerationError(CareerAdvisorError):
    default_message = "AI error"
