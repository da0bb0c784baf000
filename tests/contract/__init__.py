"""
Contract tests for API response shapes and store behaviour.

These tests verify that:
- API responses keep their field names and types
- Every store implementation honours the same replace/guard rules
"""

from typing import Any, Dict, Optional


def assert_response_shape(
    response_data: Any,
    expected_fields: Dict[str, type],
    *,
    allow_extra: bool = True,
    path: str = "",
) -> None:
    """Assert that response data matches expected field types.

    Args:
        response_data: The response JSON data to validate
        expected_fields: Dict mapping field names to expected types
        allow_extra: If True, allows extra fields not in expected_fields
        path: Current path in nested structure (for error messages)

    Raises:
        AssertionError: If response doesn't match expected shape
    """
    if not isinstance(response_data, dict):
        raise AssertionError(f"{path or 'Response'} expected dict, got {type(response_data).__name__}")

    for field_name, expected_type in expected_fields.items():
        field_path = f"{path}.{field_name}" if path else field_name

        if field_name not in response_data:
            raise AssertionError(f"Missing required field: {field_path}")

        actual_value = response_data[field_name]
        if actual_value is None:
            continue

        # bool is an int subclass; keep them apart
        if expected_type is int and isinstance(actual_value, bool):
            raise AssertionError(f"{field_path}: expected int, got bool")
        if not isinstance(actual_value, expected_type):
            raise AssertionError(
                f"{field_path}: expected {expected_type.__name__}, got {type(actual_value).__name__}"
            )

    if not allow_extra:
        extra_fields = set(response_data.keys()) - set(expected_fields.keys())
        if extra_fields:
            raise AssertionError(f"{path or 'Response'} has unexpected fields: {extra_fields}")


def assert_list_response(
    response_data: Any,
    item_fields: Optional[Dict[str, type]] = None,
    *,
    min_items: int = 0,
    path: str = "",
) -> None:
    """Assert that response is a list with optional item shape validation.

    Args:
        response_data: The response JSON data (expected to be a list)
        item_fields: Optional dict of expected fields in each list item
        min_items: Minimum number of items expected
        path: Current path in nested structure (for error messages)
    """
    if not isinstance(response_data, list):
        raise AssertionError(f"{path or 'Response'} expected list, got {type(response_data).__name__}")

    if len(response_data) < min_items:
        raise AssertionError(f"{path or 'Response'} expected at least {min_items} items, got {len(response_data)}")

    if item_fields:
        for i, item in enumerate(response_data):
            item_path = f"{path}[{i}]" if path else f"[{i}]"
            assert_response_shape(item, item_fields, path=item_path)


def assert_error_response(response_data: Any) -> None:
    """Assert that response is an {"error": message} body."""
    assert_response_shape(response_data, {"error": str}, allow_extra=False)
    if not response_data["error"]:
        raise AssertionError("Error response has an empty message")
