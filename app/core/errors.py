# app/core/errors.py

# Services raise these; main.create_app maps each one to its status code
# and a {"error": message} body.


class CatalogError(Exception):
    """Base class for all catalog errors."""

    status_code = 500


class ValidationError(CatalogError):
    """A required field is missing or falsy."""

    status_code = 400


class NotFoundError(CatalogError):
    """The requested product does not exist."""

    status_code = 404


class ConfigurationError(Exception):
    """Raised when the service is started with an invalid setting."""
