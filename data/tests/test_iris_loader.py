import zipfile
from collections import Counter

import pytest
import torch
from data.iris import INVERSE, IRIS_ARCHIVE, LABELS, DatasetError, iris_vectors, load_iris, records_to_tensor


def _write_zip(path, text, member="iris.data"):
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr(member, text)
    return path


def test_bundled_iris_loads_in_file_order():
    records = load_iris()
    assert IRIS_ARCHIVE.exists()
    assert len(records) == 150
    assert [r.index for r in records] == list(range(150))
    assert records[0].measures == [5.1, 3.5, 1.4, 0.2]
    assert records[0].label == "Iris-setosa"
    assert records[-1].measures == [5.9, 3.0, 5.1, 1.8]
    assert records[-1].label == "Iris-virginica"
    assert Counter(r.label for r in records) == {name: 50 for name in INVERSE}


def test_iris_vectors_shape_and_non_negative():
    v = iris_vectors()
    assert v.shape == (150, 4)
    assert v.dtype == torch.float64
    assert bool((v >= 0).all())


def test_label_maps_are_inverse_and_immutable():
    for name, code in LABELS.items():
        assert INVERSE[code] == name
    assert load_iris()[60].label_code == 1
    with pytest.raises(TypeError):
        LABELS["Iris-new"] = 3  # type: ignore[index]


def test_loader_skips_blank_lines(tmp_path):
    p = _write_zip(tmp_path / "ok.zip", "1,2,3,4,Iris-setosa\n\n5,6,7,8,Iris-virginica\n\n")
    records = load_iris(p)
    assert [r.index for r in records] == [0, 1]
    assert records[1].label_code == 2


def test_unparseable_number_is_fatal(tmp_path):
    p = _write_zip(tmp_path / "bad.zip", "1,2,3,4,Iris-setosa\n1,x,3,4,Iris-setosa\n")
    with pytest.raises(DatasetError, match="cannot parse"):
        load_iris(p)


def test_short_record_is_fatal(tmp_path):
    p = _write_zip(tmp_path / "short.zip", "1,2,3\n")
    with pytest.raises(DatasetError):
        load_iris(p)


def test_missing_member_and_bad_archive(tmp_path):
    with pytest.raises(DatasetError, match="no member"):
        load_iris(_write_zip(tmp_path / "other.zip", "1,2,3,4,a\n", member="other.csv"))
    junk = tmp_path / "junk.zip"
    junk.write_bytes(b"not a zip archive")
    with pytest.raises(DatasetError):
        load_iris(junk)
    with pytest.raises(DatasetError):
        load_iris(tmp_path / "missing.zip")


def test_empty_archive_member_is_fatal(tmp_path):
    with pytest.raises(DatasetError, match="no records"):
        load_iris(_write_zip(tmp_path / "empty.zip", "\n"))


def test_records_to_tensor_requires_records():
    with pytest.raises(ValueError):
        records_to_tensor([])
