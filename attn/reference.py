from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import torch

from tensor.numerics import shifted_softmax


@dataclass
class SelfAttentionResult:
    gram: torch.Tensor  # (n,n) G = V V^T
    probs: torch.Tensor  # (n,n) row-wise softmax of G
    output: torch.Tensor  # (n,d) probs @ V


def _check_vectors(v: torch.Tensor) -> None:
    if v.ndim != 2:
        raise ValueError(f"expected a (n, d) vector set, got shape {tuple(v.shape)}")
    if v.shape[0] == 0:
        raise ValueError("vector set is empty")


def gram_matrix(v: torch.Tensor) -> torch.Tensor:
    # v: (n,d) -> G: (n,n), G[i,j] = <v_i, v_j>
    return torch.matmul(v, v.transpose(-2, -1))


def compute_attention_probs(
    v: torch.Tensor,
    softmax: Callable[[torch.Tensor], torch.Tensor] | None = None,
) -> tuple[torch.Tensor, torch.Tensor]:
    # v: (n,d) -> (G, probs), both (n,n)
    _check_vectors(v)
    scores = gram_matrix(v)
    fn = softmax if softmax is not None else shifted_softmax
    return scores, fn(scores, dim=-1)


def apply_attention_probs(v: torch.Tensor, probs: torch.Tensor) -> torch.Tensor:
    # v: (n,d), probs: (n,n) -> out: (n,d)
    return torch.matmul(probs, v)


def self_attention(
    v: torch.Tensor,
    softmax: Callable[[torch.Tensor], torch.Tensor] | None = None,
) -> SelfAttentionResult:
    """Unscaled self-similarity attention with no projections.

    Queries, keys and values are all `v`. Inputs are expected to be
    non-negative; this is not checked here.
    """
    gram, probs = compute_attention_probs(v, softmax=softmax)
    out = apply_attention_probs(v, probs)
    return SelfAttentionResult(gram=gram, probs=probs, output=out)
