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
                "field": "limit",
                "message": "Input should be less than or equal to 50",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Single-cause errors (authorization, backend failures)
    - Multi-field validation errors (error + details array)

    Examples:
        Single-cause error:
            {
                "error": "Authentication required",
                "code": "UNAUTHORIZED"
            }

        Validation error with multiple fields:
            {
                "error": "Invalid query parameters",
                "code": "VALIDATION_ERROR",
                "details": [
                    {
                        "field": "limit",
                        "message": "Input should be less than or equal to 50",
                        "code": "less_than_equal"
                    }
                ]
            }
    """

    error: str
    code: str | None = None
    details: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"error": "Authentication required", "code": "UNAUTHORIZED"},
                {
                    "error": "Invalid query parameters",
                    "code": "VALIDATION_ERROR",
                    "details": [
                        {
                            "field": "limit",
                            "message": "Input should be less than or equal to 50",
                            "code": "less_than_equal",
                        },
                        {
                            "field": "status",
                            "message": "Input should be 'active' or 'inactive'",
                            "code": "enum",
                        },
                    ],
                },
            ]
        }
    )
