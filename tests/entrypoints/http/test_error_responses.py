"""Tests for REST error response models."""

from salon_catalog.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    """Tests for ErrorDetail model."""

    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(
            field="price_bucket",
            message="Must be one of: all, low, medium, high",
            code="INVALID_CHOICE",
        )

        assert detail.field == "price_bucket"
        assert detail.code == "INVALID_CHOICE"

    def test_serializes_to_dict_without_code(self) -> None:
        detail = ErrorDetail(field="offset", message="Must be positive")

        assert detail.model_dump() == {
            "field": "offset",
            "message": "Must be positive",
            "code": None,
        }


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_simple_error(self) -> None:
        response = ErrorResponse(detail="HTTP 503: Service Unavailable", code="UPSTREAM_STATUS")

        assert response.detail == "HTTP 503: Service Unavailable"
        assert response.errors is None

    def test_error_with_field_errors(self) -> None:
        response = ErrorResponse.model_validate(
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "activeness", "message": "Unknown value"}],
            }
        )

        assert response.errors == [ErrorDetail(field="activeness", message="Unknown value")]

    def test_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
