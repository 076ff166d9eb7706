"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "email",
                "message": "Email es obligatorio.",
                "code": "REQUIRED",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Vehicle with identifier 'fiat-uno-1995' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Nombre y email son obligatorios.",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "name", "message": "Nombre es obligatorio.", "code": "REQUIRED"},
                    {"field": "email", "message": "Email es obligatorio.", "code": "REQUIRED"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Vehicle with identifier 'fiat-uno-1995' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Nombre y email son obligatorios.",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "name",
                            "message": "Nombre es obligatorio.",
                            "code": "REQUIRED",
                        },
                        {
                            "field": "email",
                            "message": "Email es obligatorio.",
                            "code": "REQUIRED",
                        },
                    ],
                },
            ]
        }
    )
