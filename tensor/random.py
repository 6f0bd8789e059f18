import torch


def seeded_generator(seed: int) -> torch.Generator:
    gen = torch.Generator(device="cpu")
    gen.manual_seed(int(seed))
    return gen


def uniform_stream(shape: tuple[int, ...], seed: int, dtype: torch.dtype = torch.float64) -> torch.Tensor:
    """Stateless random stream: returns U[0,1) values shaped as `shape`.

    Deterministic per seed and independent of the global RNG state.
    """
    gen = seeded_generator(seed)
    return torch.rand(tuple(int(s) for s in shape), generator=gen, dtype=dtype)
