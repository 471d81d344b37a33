"""
Service Errors

Exceptions raised by the service layer. Each carries the HTTP status the
API reports for it.
"""


class MealPlannerError(Exception):
    """Base class for service-layer failures."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(MealPlannerError):
    """Input was well-formed but not acceptable (e.g. nothing to update)."""
    status_code = 400


class NotFoundError(MealPlannerError):
    """The addressed row does not exist."""
    status_code = 404
