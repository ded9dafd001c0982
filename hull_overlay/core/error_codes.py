"""
Structured error codes and exceptions for hull, curve and label operations.
Each exception carries its code; map codes to user-facing messages with user_message.
"""

from __future__ import annotations

# Known error keys
INSUFFICIENT_POINTS = "insufficient_points"
INSUFFICIENT_UNIQUE_POINTS = "insufficient_unique_points"
UNSUPPORTED_CURVE_FAMILY = "unsupported_curve_family"
INVALID_CURVE_PARAMETER = "invalid_curve_parameter"
PATH_GENERATION_FAILED = "path_generation_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INSUFFICIENT_POINTS: "At least 3 points are required. Add more elements to the group.",
    INSUFFICIENT_UNIQUE_POINTS: "At least 3 distinct points are required. The group's elements collapse onto fewer points.",
    UNSUPPORTED_CURVE_FAMILY: "Unknown curve type. Use linear, catmull-rom, cardinal, basis or basis-closed.",
    INVALID_CURVE_PARAMETER: "Curve tension and alpha must lie between 0.0 and 1.0.",
    PATH_GENERATION_FAILED: "The curve could not be drawn from this boundary. Check the input coordinates.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class HullOverlayError(ValueError):
    """Base class for input validation failures. Never retried: inputs are deterministic."""

    code: str = ""

    @property
    def user_message(self) -> str:
        return user_message(self.code)


class InsufficientPointsError(HullOverlayError):
    code = INSUFFICIENT_POINTS


class InsufficientUniquePointsError(HullOverlayError):
    code = INSUFFICIENT_UNIQUE_POINTS


class UnsupportedCurveFamilyError(HullOverlayError):
    code = UNSUPPORTED_CURVE_FAMILY


class InvalidCurveParameterError(HullOverlayError):
    code = INVALID_CURVE_PARAMETER


class PathGenerationFailedError(HullOverlayError):
    code = PATH_GENERATION_FAILED
