"""Error taxonomy shared by repositories, identity resolution and routes.

``Unauthenticated`` and ``Forbidden`` are raised by the identity dependencies
and turned into a login redirect / 403 page by the handlers registered in
``mentorhub.main``. ``ValidationError`` and ``NotFound`` are raised by the
CRUD layer and rendered inline by the route that called it.
"""


class MentorHubError(Exception):
    """Base class for application errors."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class Unauthenticated(MentorHubError):
    """No valid session cookie maps to an existing user."""

    status_code = 401


class Forbidden(MentorHubError):
    """The user is authenticated but their role is not allowed."""

    status_code = 403


class ValidationError(MentorHubError, ValueError):
    """Missing or invalid field, bad enum value, out-of-range rating."""

    status_code = 400


class NotFound(MentorHubError, LookupError):
    """A lookup by id or email matched nothing."""

    status_code = 404
