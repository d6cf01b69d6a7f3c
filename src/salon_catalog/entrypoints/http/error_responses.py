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
                "field": "price_bucket",
                "message": "Must be one of: all, low, medium, high",
                "code": "INVALID_CHOICE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "HTTP 503: Service Unavailable",
                "code": "UPSTREAM_STATUS"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "activeness",
                        "message": "Must be one of: all, active, inactive",
                        "code": "INVALID_CHOICE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Service with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "HTTP 503: Service Unavailable", "code": "UPSTREAM_STATUS"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "activeness",
                            "message": "Must be one of: all, active, inactive",
                            "code": "INVALID_CHOICE",
                        },
                    ],
                },
            ]
        }
    )
