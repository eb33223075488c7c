"""CLI utilities package."""

import math
from typing import Any, Optional

ABSENT_TOKENS = ("", "none", "null", "undefined")


def parse_value(raw: str) -> Any:
    """
    Turn a command-line value into what a dashboard would pass in.
    
    "none"/"null"/"" mean a missing value, "nan" is NaN, numbers become
    int or float, and anything else is passed through as text.
    """
    token = raw.strip()
    if token.lower() in ABSENT_TOKENS:
        return None
    if token.lower() == "nan":
        return math.nan
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        return token


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


__all__ = ["parse_value", "format_error", "ABSENT_TOKENS"]
