import torch


def cosine_similarity(a: torch.Tensor, b: torch.Tensor) -> float:
    """Cosine of the angle between two equal-length vectors.

    Returns 0.0 when either vector has zero squared norm instead of dividing
    by zero. Inputs are flattened and compared in float64.
    """
    a = torch.as_tensor(a).reshape(-1).to(torch.float64)
    b = torch.as_tensor(b).reshape(-1).to(torch.float64)
    if a.numel() != b.numel():
        raise ValueError(f"length mismatch: {a.numel()} vs {b.numel()}")
    ab = torch.dot(a, b)
    aa = torch.dot(a, a)
    bb = torch.dot(b, b)
    if aa <= 0 or bb <= 0:
        return 0.0
    return float(ab / (torch.sqrt(aa) * torch.sqrt(bb)))
