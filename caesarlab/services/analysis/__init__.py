"""Key recovery for the Caesar cipher: exhaustive search and frequency analysis."""

from caesarlab.services.analysis.brute_force import brute_force_decrypt
from caesarlab.services.analysis.frequency import rank_keys, statistical_analysis

__all__ = [
    "brute_force_decrypt",
    "rank_keys",
    "statistical_analysis",
]
