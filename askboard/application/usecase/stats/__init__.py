"""Stats use cases."""

from .get_stats import GetStatsResponse, GetStatsUseCase

__all__ = ["GetStatsResponse", "GetStatsUseCase"]
