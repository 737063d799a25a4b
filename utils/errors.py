# utils/errors.py
"""
API error taxonomy.

Services raise these; the handler registered in app.py turns every one of
them into a ``{"message": ...}`` JSON body with the matching status code.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"message": self.message}


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "Not authorized, no valid token"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


# Duplicate email is reported as a plain bad request
class Conflict(ApiError):
    status_code = 400
    default_message = "User already exists"
