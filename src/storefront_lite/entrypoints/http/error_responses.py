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
                "field": "price",
                "message": "Input should be greater than 0",
                "code": "greater_than",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just error and code)
    - Multi-field validation errors (error + errors array)
    - Error codes for i18n (code field can be used for translation keys)

    Examples:
        Simple error:
            {
                "error": "Product not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "error": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "price",
                        "message": "Input should be greater than 0",
                        "code": "greater_than"
                    }
                ]
            }
    """

    error: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"error": "Product not found", "code": "NOT_FOUND"},
                {
                    "error": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price",
                            "message": "Input should be greater than 0",
                            "code": "greater_than",
                        },
                        {
                            "field": "description",
                            "message": "String should have at least 10 characters",
                            "code": "string_too_short",
                        },
                    ],
                },
            ]
        }
    )
