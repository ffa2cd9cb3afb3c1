'''
----------------------------
API errors
Raised by services and resources, rendered as {"error": message}
----------------------------
'''


class ApiError(Exception):
    status_code = 500
    message = "An unexpected error occurred"

    def __init__(self, message = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error": self.message}


# Missing required field
class ValidationError(ApiError):
    status_code = 400
    message = "All fields are required"


class DuplicateEmailError(ApiError):
    status_code = 400
    message = "Email is already registered"


# Same message for unknown email and wrong password
class InvalidCredentialsError(ApiError):
    status_code = 401
    message = "Invalid email or password"


class UnauthenticatedError(ApiError):
    status_code = 401
    message = "You must be logged in to access this resource"


class NotFoundError(ApiError):
    status_code = 404
    message = "Resource not found"


class InternalError(ApiError):
    status_code = 500
