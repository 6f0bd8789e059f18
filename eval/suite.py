from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import torch

from attn.reference import self_attention
from data.iris import iris_vectors
from data.synthetic import random_vector_set
from specs.config import SuiteConfig
from specs.resolve import resolve_from_config
from tensor.spectral import principal_eigenvector_magnitudes


logger = logging.getLogger(__name__)


@dataclass
class TrialResult:
    index: int
    source: str  # "reference" or "random"
    seed: Optional[int]
    similarity: float
    below_threshold: bool
    degenerate_eigenvalue: bool = False


@dataclass
class SuiteResult:
    fail_count: int
    total_count: int
    threshold: float
    trials: List[TrialResult] = field(default_factory=list)


def compare_signals(vectors: torch.Tensor, ops: Dict[str, Callable], *, tie_tol: float = 1e-9) -> Tuple[float, bool]:
    """Cosine similarity between principal-eigenvector magnitudes and the first attention feature.

    Both signals have one entry per sample (length n), not per feature.
    """
    att = self_attention(vectors, softmax=ops["softmax"])
    principal = principal_eigenvector_magnitudes(att.gram, decompose=ops["decompose"], tie_tol=tie_tol)
    i_sig = principal.magnitudes
    j_sig = att.output[:, 0]
    return ops["similarity"](i_sig, j_sig), principal.degenerate


def run_trial(
    vectors: torch.Tensor,
    *,
    index: int,
    source: str,
    seed: Optional[int] = None,
    config: Optional[SuiteConfig] = None,
    ops: Optional[Dict[str, Callable]] = None,
) -> TrialResult:
    cfg = config or SuiteConfig()
    ops = ops or resolve_from_config(cfg)
    cs, degenerate = compare_signals(vectors, ops, tie_tol=cfg.tie_tol)
    res = TrialResult(
        index=index,
        source=source,
        seed=seed,
        similarity=cs,
        below_threshold=cs < cfg.threshold,
        degenerate_eigenvalue=degenerate,
    )
    logger.debug("trial %d (%s, seed=%s): cosine=%.6f below=%s", index, source, seed, cs, res.below_threshold)
    return res


def run_suite(config: Optional[SuiteConfig] = None, *, reference: Optional[torch.Tensor] = None) -> SuiteResult:
    """Run one reference trial followed by `num_random_trials` seeded synthetic trials.

    Trial i > 0 uses seed i, so the same config always yields the same counts.
    Any dataset or decomposition error aborts the whole suite.
    """
    cfg = (config or SuiteConfig()).validate()
    ops = resolve_from_config(cfg)
    dtype = cfg.torch_dtype
    ref = reference if reference is not None else iris_vectors(cfg.dataset_path, dtype=dtype)
    ref = ref.to(dtype=dtype)
    logger.info(
        "running %d trials (1 reference, %d random, n=%d, d=%d)",
        cfg.total_trials, cfg.num_random_trials, cfg.num_samples, cfg.num_features,
    )

    def _run_one(idx: int) -> TrialResult:
        if idx == 0:
            return run_trial(ref, index=0, source="reference", config=cfg, ops=ops)
        seed = idx
        vecs = random_vector_set(seed, n=cfg.num_samples, d=cfg.num_features, dtype=dtype)
        return run_trial(vecs, index=idx, source="random", seed=seed, config=cfg, ops=ops)

    indices = list(range(cfg.total_trials))
    if cfg.concurrency <= 1:
        trials = [_run_one(i) for i in indices]
    else:
        with ThreadPoolExecutor(max_workers=int(cfg.concurrency)) as ex:
            # map() re-raises the first failure and keeps index order
            trials = list(ex.map(_run_one, indices))

    fail_count = sum(1 for t in trials if t.below_threshold)
    logger.info("%d/%d trials below cosine similarity %s", fail_count, len(trials), cfg.threshold)
    return SuiteResult(fail_count=fail_count, total_count=len(trials), threshold=cfg.threshold, trials=trials)
