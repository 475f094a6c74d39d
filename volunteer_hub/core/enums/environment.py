"""Runtime environments.

Settings use the environment to pick logging output (console renderer for
development, JSON everywhere else).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
