import torch
import torch.nn.functional as F


# Shift applied to the row maximum before exponentiation. In float64 the
# product rounds back to the maximum itself, so this matches plain
# max-subtraction up to the last bit.
SOFTMAX_SHIFT_SCALE = 1.0 - 1e-300


def shifted_softmax(x: torch.Tensor, dim: int = -1, scale: float = SOFTMAX_SHIFT_SCALE) -> torch.Tensor:
    """Softmax along `dim` with the exponent shifted by `max * scale`.

    A constant slice maps to the uniform distribution 1/n.
    """
    x_max = x.max(dim=dim, keepdim=True).values
    shift = x_max * float(scale)
    e = torch.exp(x - shift)
    return e / e.sum(dim=dim, keepdim=True)


def safe_softmax(x: torch.Tensor, dim: int = -1) -> torch.Tensor:
    x_float = x if x.dtype == torch.float64 else x.float()
    out = F.softmax(x_float, dim=dim)
    return out.to(dtype=x.dtype)


def assert_prob_simplex(p: torch.Tensor, dim: int = -1, atol: float = 1e-9) -> bool:
    s = p.sum(dim=dim)
    if not torch.allclose(s, torch.ones_like(s), rtol=0.0, atol=atol):
        raise AssertionError("Probabilities must sum to 1 along dim")
    if (p < 0).any():
        raise AssertionError("Probabilities must be non-negative")
    return True


def assert_finite(x: torch.Tensor, name: str | None = None) -> None:
    if not torch.isfinite(x).all():
        n = name or "tensor"
        raise AssertionError(f"Non-finite values in {n}: shape={tuple(x.shape)} dtype={x.dtype}")


def is_symmetric(x: torch.Tensor, atol: float = 1e-9, rtol: float = 1e-10) -> bool:
    if x.ndim != 2 or x.shape[0] != x.shape[1]:
        return False
    return bool(torch.allclose(x, x.transpose(-2, -1), rtol=rtol, atol=atol))
