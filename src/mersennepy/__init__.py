"""Public package API for mersennepy."""

from .config import clear_config, configure_search, get_config
from .lucas_lehmer import is_mersenne_prime
from .prime import is_prime
from .reduce import mod_mersenne
from .runtime import cancel_job, cancel_requested, parallel_map
from .search import SearchReport, TestResult, search

__all__ = [
    "configure_search",
    "get_config",
    "clear_config",
    "is_prime",
    "is_mersenne_prime",
    "mod_mersenne",
    "search",
    "SearchReport",
    "TestResult",
    "parallel_map",
    "cancel_job",
    "cancel_requested",
]
