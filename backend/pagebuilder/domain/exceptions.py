from typing import Any, Dict, Optional


class PageBuilderError(Exception):
    """
    Base class for errors surfaced to callers of the page builder.

    Each subclass carries a stable error code and the HTTP status the
    API layer answers with.
    """

    code = "page_builder_error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.code,
            "message": self.public_message,
        }


class MissingFieldError(PageBuilderError):
    code = "missing_field"

    def __init__(self, field: str):
        super().__init__(f"Page {field} is required")
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class ValidationError(PageBuilderError):
    code = "validation_failed"

    def __init__(
        self,
        reason: str,
        *,
        section_index: Optional[int] = None,
        section_type: Optional[str] = None,
    ):
        super().__init__(reason)
        self.reason = reason
        self.section_index = section_index
        self.section_type = section_type

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.section_index is not None:
            data["section_index"] = self.section_index
        if self.section_type is not None:
            data["section_type"] = self.section_type
        return data


class ConflictError(PageBuilderError):
    code = "page_published"
    status_code = 409

    def __init__(self, message: str, *, slug: Optional[str] = None):
        super().__init__(message)
        self.slug = slug


class IllegalTransition(ConflictError):
    code = "illegal_transition"


class NotFoundError(PageBuilderError):
    code = "not_found"
    status_code = 404

    def __init__(self, slug: str):
        super().__init__(f"Page not found: {slug}")
        self.slug = slug


class PersistenceError(PageBuilderError):
    """
    The durable backend was unreachable, rejected an operation, or
    acknowledged a write that could not be read back.

    `message` is diagnostic detail for operators; end users only ever see
    `public_message`.
    """

    code = "persistence_failed"
    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        slug: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.slug = slug
        self.cause = cause

    @property
    def public_message(self) -> str:
        if self.operation in ("upsert", "verify"):
            return "Could not save the page. Please try again later."
        return "Could not complete the storage operation. Please try again later."


class CatalogError(PageBuilderError):
    code = "catalog_unavailable"
    status_code = 502

    @property
    def public_message(self) -> str:
        return "Product catalog is currently unavailable."
