import pytest
import torch
from specs import SuiteConfig, get_op, has_op, list_ops, resolve_from_config
from tensor.metrics import cosine_similarity
from tensor.numerics import shifted_softmax


def test_defaults_match_reference_configuration():
    cfg = SuiteConfig().validate()
    assert cfg.num_random_trials == 128
    assert cfg.total_trials == 129
    assert (cfg.num_samples, cfg.num_features) == (150, 4)
    assert cfg.threshold == 0.95
    assert cfg.torch_dtype == torch.float64


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_random_trials": -1},
        {"num_samples": 0},
        {"threshold": 1.5},
        {"dtype": "float16"},
        {"tie_tol": -1.0},
        {"concurrency": 0},
    ],
)
def test_validate_rejects_out_of_range(kwargs):
    with pytest.raises(ValueError):
        SuiteConfig(**kwargs).validate()


def test_resolve_from_config_returns_callables():
    ops = resolve_from_config(SuiteConfig())
    assert ops["softmax"] is shifted_softmax
    assert ops["similarity"] is cosine_similarity
    assert ops["decompose"] is get_op("spectral", "eigh")


def test_unknown_op_names_raise_key_error():
    with pytest.raises(KeyError, match="Available"):
        resolve_from_config(SuiteConfig(softmax="sparsemax"))
    with pytest.raises(KeyError):
        resolve_from_config(SuiteConfig(eigen="power"))


def test_registry_listing():
    assert has_op("spectral", "eig")
    assert not has_op("spectral", "svd")
    assert set(list_ops("numerics")["numerics"]) == {"shifted_softmax", "safe_softmax"}
    assert "metrics" in list_ops()
