from __future__ import annotations

import logging
from dataclasses import dataclass

import torch

from .numerics import assert_finite, is_symmetric


logger = logging.getLogger(__name__)


class EigenDecompositionError(RuntimeError):
    """Raised when the eigen solver fails to converge or returns non-finite values."""


@dataclass
class PrincipalEigenvector:
    magnitudes: torch.Tensor  # (n,) entrywise |v[r]|
    eigenvalue: float
    index: int  # column of the selected eigenvector in the solver output
    degenerate: bool = False  # another eigenvalue ties the dominant magnitude


def eigendecomposition(A: torch.Tensor, method: str = "eigh") -> tuple[torch.Tensor, torch.Tensor]:
    """Eigenvalues and right eigenvectors (as columns) of a square matrix.

    `eigh` assumes a symmetric input and returns real values in ascending
    order; `eig` is the general solver and returns complex values in no
    particular order. Callers must not rely on either ordering.
    """
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {tuple(A.shape)}")
    try:
        assert_finite(A, "eigen input")
    except AssertionError as e:
        raise EigenDecompositionError(str(e)) from e
    if method == "eigh" and not is_symmetric(A):
        raise ValueError("eigh requires a symmetric matrix; use method='eig' for general input")
    try:
        if method == "eigh":
            eigvals, eigvecs = torch.linalg.eigh(A)
        elif method == "eig":
            eigvals, eigvecs = torch.linalg.eig(A)
        else:
            raise ValueError(f"unknown eigen method '{method}' (expected 'eigh' or 'eig')")
    except torch.linalg.LinAlgError as e:
        raise EigenDecompositionError(f"eigenvalue decomposition failed: {e}") from e
    if not (torch.isfinite(eigvals).all() and torch.isfinite(eigvecs).all()):
        raise EigenDecompositionError("eigenvalue decomposition produced non-finite values")
    return eigvals, eigvecs


def eigh_decomposition(A: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor]:
    return eigendecomposition(A, method="eigh")


def eig_decomposition(A: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor]:
    return eigendecomposition(A, method="eig")


def dominant_index(eigvals: torch.Tensor, tie_tol: float = 1e-9) -> tuple[int, bool]:
    """Index of the largest-magnitude eigenvalue and whether it is tied.

    The tie tolerance is relative to the dominant magnitude.
    """
    mags = eigvals.abs()
    idx = int(torch.argmax(mags))
    top = float(mags[idx])
    others = torch.cat([mags[:idx], mags[idx + 1:]])
    degenerate = bool(others.numel() > 0 and float(others.max()) >= top - tie_tol * max(top, 1.0))
    return idx, degenerate


def principal_eigenvector_magnitudes(
    G: torch.Tensor,
    *,
    method: str = "eigh",
    decompose=None,
    tie_tol: float = 1e-9,
) -> PrincipalEigenvector:
    """Per-sample magnitudes of the eigenvector paired with the dominant eigenvalue.

    The dominant eigenvalue is found by scanning magnitudes, not by taking the
    first column. When two eigenvalues share the maximal magnitude the choice
    is not unique; the first one found is used and the result is flagged as
    degenerate. `decompose`, when given, replaces the solver picked by `method`.
    """
    if decompose is not None:
        eigvals, eigvecs = decompose(G)
    else:
        eigvals, eigvecs = eigendecomposition(G, method=method)
    idx, degenerate = dominant_index(eigvals, tie_tol=tie_tol)
    if degenerate:
        logger.warning(
            "dominant eigenvalue %.6g is not unique; principal eigenvector is ambiguous",
            float(eigvals[idx].abs()),
        )
    # abs() of a complex column is already real
    mags = eigvecs[:, idx].abs()
    lam = eigvals[idx]
    lam = float(lam.real) if lam.is_complex() else float(lam)
    return PrincipalEigenvector(magnitudes=mags, eigenvalue=lam, index=idx, degenerate=degenerate)
