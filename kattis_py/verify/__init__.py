"""Local verification of a solution against its samples."""

from .cases import TestCase, load_test_cases, name_predicate
from .compare import fuzzy_equal
from .engine import verify_solution, watch_solution
from .executor import CaseResult, Verdict, build_solution, run_test_cases
from .watch import WatchScheduler, watch_paths

__all__ = [
    "CaseResult",
    "TestCase",
    "Verdict",
    "WatchScheduler",
    "build_solution",
    "fuzzy_equal",
    "load_test_cases",
    "name_predicate",
    "run_test_cases",
    "verify_solution",
    "watch_paths",
    "watch_solution",
]
