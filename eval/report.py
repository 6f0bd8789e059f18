from __future__ import annotations

from typing import List

from .suite import SuiteResult


def format_threshold(threshold: float) -> str:
    # 0.95 -> ".95"
    s = f"{float(threshold):g}"
    if s.startswith("0."):
        return s[1:]
    if s.startswith("-0."):
        return "-" + s[2:]
    return s


def format_summary(result: SuiteResult) -> str:
    return f"{result.fail_count}/{result.total_count} outside of cosine similarity {format_threshold(result.threshold)}"


def format_trials(result: SuiteResult) -> str:
    lines: List[str] = [f"{'trial':>5}  {'source':<9}  {'seed':>5}  {'cosine':>9}  status"]
    for t in result.trials:
        seed = "-" if t.seed is None else str(t.seed)
        status = "BELOW" if t.below_threshold else "ok"
        if t.degenerate_eigenvalue:
            status += " (tied eigenvalue)"
        lines.append(f"{t.index:>5}  {t.source:<9}  {seed:>5}  {t.similarity:>9.6f}  {status}")
    return "\n".join(lines)
