from .numerics import (
    SOFTMAX_SHIFT_SCALE,
    shifted_softmax,
    safe_softmax,
    assert_finite,
    is_symmetric,
)
from .metrics import cosine_similarity
from .spectral import (
    EigenDecompositionError,
    PrincipalEigenvector,
    eigendecomposition,
    eigh_decomposition,
    eig_decomposition,
    dominant_index,
    principal_eigenvector_magnitudes,
)
from .random import seeded_generator, uniform_stream

__all__ = [
    "SOFTMAX_SHIFT_SCALE",
    "shifted_softmax",
    "safe_softmax",
    "assert_finite",
    "is_symmetric",
    "cosine_similarity",
    "EigenDecompositionError",
    "PrincipalEigenvector",
    "eigendecomposition",
    "eigh_decomposition",
    "eig_decomposition",
    "dominant_index",
    "principal_eigenvector_magnitudes",
    "seeded_generator",
    "uniform_stream",
]
