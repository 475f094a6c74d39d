"""Background jobs."""

from volunteer_hub.infrastructure.jobs.refresh_token_sweeper import RefreshTokenSweeper

__all__ = ["RefreshTokenSweeper"]
