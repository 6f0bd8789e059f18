import torch
from tensor.random import uniform_stream


def test_uniform_stream_is_deterministic_per_seed():
    a = uniform_stream((150, 4), seed=7)
    b = uniform_stream((150, 4), seed=7)
    assert torch.equal(a, b)
    assert a.dtype == torch.float64


def test_uniform_stream_range_and_seed_sensitivity():
    a = uniform_stream((64, 4), seed=1)
    b = uniform_stream((64, 4), seed=2)
    assert bool((a >= 0).all()) and bool((a < 1).all())
    assert not torch.equal(a, b)


def test_uniform_stream_ignores_global_rng():
    torch.manual_seed(0)
    a = uniform_stream((8,), seed=3)
    torch.rand(100)
    b = uniform_stream((8,), seed=3)
    assert torch.equal(a, b)
