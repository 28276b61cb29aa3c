# =============================================================================
# core/numbers.py  -  Lenient Integer Parsing for Tool Arguments
# =============================================================================
#
# LLMs don't always send clean integers.  "3 days", "5.0" or "lots" can
# arrive as a day count or a result limit.  Rather than fail the whole tool
# call, the tools read the leading integer and clamp it:
#
#   "3 days"  →  3
#   " -2"     →  -2
#   "lots"    →  0      (then clamped up to the minimum)
#   4.9       →  4
# =============================================================================

import re

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def leading_int(value) -> int:
    """Leading integer of value, or 0 when there isn't one."""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    match = _LEADING_INT.match(str(value))
    return int(match.group()) if match else 0
