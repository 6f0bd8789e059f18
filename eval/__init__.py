from .suite import TrialResult, SuiteResult, compare_signals, run_trial, run_suite
from .report import format_threshold, format_summary, format_trials

__all__ = [
    "TrialResult",
    "SuiteResult",
    "compare_signals",
    "run_trial",
    "run_suite",
    "format_threshold",
    "format_summary",
    "format_trials",
]
