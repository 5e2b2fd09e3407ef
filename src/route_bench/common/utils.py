"""Utility functions for route benchmarking."""

PLACEHOLDER = "-"


def validate_non_empty_string(value: str | None, field_name: str) -> str:
    """Validate that a string is not empty or only whitespace.

    Args:
        value: String value to validate
        field_name: Name of the field for error messages

    Returns:
        Stripped string value

    Raises:
        ValueError: If string is empty or only whitespace
    """
    if not value or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value.strip()


def format_metric(value: float | int | None, decimals: int = 1) -> str:
    """Format an optional metric for display, using a placeholder for None."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, int):
        return str(value)
    return f"{value:.{decimals}f}"
