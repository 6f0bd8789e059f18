from .reference import (
    SelfAttentionResult,
    gram_matrix,
    compute_attention_probs,
    apply_attention_probs,
    self_attention,
)

__all__ = [
    "SelfAttentionResult",
    "gram_matrix",
    "compute_attention_probs",
    "apply_attention_probs",
    "self_attention",
]
