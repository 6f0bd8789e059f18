from .iris import (
    IRIS_ARCHIVE,
    LABELS,
    INVERSE,
    DatasetError,
    FisherRecord,
    load_iris,
    records_to_tensor,
    iris_vectors,
)
from .synthetic import random_vector_set, random_records

__all__ = [
    "IRIS_ARCHIVE",
    "LABELS",
    "INVERSE",
    "DatasetError",
    "FisherRecord",
    "load_iris",
    "records_to_tensor",
    "iris_vectors",
    "random_vector_set",
    "random_records",
]
