from __future__ import annotations

import csv
import io
import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

import numpy as np
import torch


logger = logging.getLogger(__name__)

IRIS_ARCHIVE = Path(__file__).resolve().parent / "assets" / "iris.zip"
IRIS_MEMBER = "iris.data"
NUM_MEASURES = 4

LABELS: Mapping[str, int] = MappingProxyType({
    "Iris-setosa": 0,
    "Iris-versicolor": 1,
    "Iris-virginica": 2,
})

INVERSE: tuple[str, ...] = ("Iris-setosa", "Iris-versicolor", "Iris-virginica")


class DatasetError(ValueError):
    """Raised when the bundled dataset cannot be read or parsed."""


@dataclass
class FisherRecord:
    """One sample: `measures` in file order plus its label and zero-based index."""

    measures: List[float]
    label: str
    index: int

    @property
    def label_code(self) -> Optional[int]:
        return LABELS.get(self.label)


def _parse_rows(text: str, source: str) -> List[FisherRecord]:
    records: List[FisherRecord] = []
    reader = csv.reader(io.StringIO(text))
    for row in reader:
        if not row or all(not cell.strip() for cell in row):
            continue
        line = reader.line_num
        if len(row) < NUM_MEASURES + 1:
            raise DatasetError(f"{source}:{line}: expected {NUM_MEASURES + 1} fields, got {len(row)}")
        measures: List[float] = []
        for cell in row[:NUM_MEASURES]:
            try:
                measures.append(float(cell))
            except ValueError as e:
                raise DatasetError(f"{source}:{line}: cannot parse {cell!r} as a number") from e
        records.append(FisherRecord(measures=measures, label=row[NUM_MEASURES], index=len(records)))
    return records


def load_iris(path: str | Path | None = None, member: str = IRIS_MEMBER) -> List[FisherRecord]:
    """Load the Fisher iris records from a zip archive.

    Raises:
        DatasetError: if the archive is missing or unreadable, lacks `member`,
            or any record is malformed. Nothing is returned on partial reads.
    """
    p = Path(path) if path is not None else IRIS_ARCHIVE
    try:
        with zipfile.ZipFile(p) as zf:
            try:
                raw = zf.read(member)
            except KeyError as e:
                raise DatasetError(f"{p}: archive has no member '{member}'") from e
    except (OSError, zipfile.BadZipFile) as e:
        raise DatasetError(f"cannot open dataset archive {p}: {e}") from e
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DatasetError(f"{p}:{member}: not valid UTF-8") from e
    records = _parse_rows(text, f"{p.name}:{member}")
    if not records:
        raise DatasetError(f"{p}:{member}: no records")
    logger.debug("loaded %d records from %s", len(records), p)
    return records


def records_to_tensor(records: Sequence[FisherRecord], dtype: torch.dtype = torch.float64) -> torch.Tensor:
    """Stack record measures into an (n, d) tensor, preserving record order."""
    if not records:
        raise ValueError("no records")
    arr = np.asarray([r.measures for r in records], dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError("records have inconsistent measure counts")
    return torch.from_numpy(arr).to(dtype=dtype)


def iris_vectors(path: str | Path | None = None, dtype: torch.dtype = torch.float64) -> torch.Tensor:
    return records_to_tensor(load_iris(path), dtype=dtype)
