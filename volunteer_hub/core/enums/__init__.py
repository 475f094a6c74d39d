"""Core enums package.

Usage:
    from volunteer_hub.core.enums import ErrorCode, Environment
"""

from volunteer_hub.core.enums.environment import Environment
from volunteer_hub.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
