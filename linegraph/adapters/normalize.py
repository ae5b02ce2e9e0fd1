from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np

from linegraph.errors import LineGraphDataError
from linegraph.series import DataPoint


def normalize_points(values: Any) -> tuple[DataPoint, ...]:
    if values is None:
        raise LineGraphDataError("points input is required")

    if isinstance(values, np.ndarray):
        return _from_array(values)

    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise LineGraphDataError(f"unsupported points input type: {type(values).__name__}")

    return tuple(_coerce_point(item, index=i) for i, item in enumerate(values))


def _from_array(arr: np.ndarray) -> tuple[DataPoint, ...]:
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise LineGraphDataError(f"points array must have shape (N, 2), got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
        raise LineGraphDataError(f"points array must be real numeric, got dtype {arr.dtype}")
    as_float = arr.astype(np.float64, copy=False)
    return tuple(DataPoint(float(x), float(y)) for x, y in as_float.tolist())


def _coerce_point(item: Any, *, index: int) -> DataPoint:
    if isinstance(item, DataPoint):
        return item
    if isinstance(item, (tuple, list)):
        if len(item) != 2:
            raise LineGraphDataError(f"point {index} must have exactly 2 values, got {len(item)}")
        x, y = item
    elif hasattr(item, "x") and hasattr(item, "y"):
        x, y = item.x, item.y
    else:
        raise LineGraphDataError(f"point {index} is not an (x, y) pair: {item!r}")
    return DataPoint(_coerce_scalar(x, index=index, axis="x"), _coerce_scalar(y, index=index, axis="y"))


def _coerce_scalar(value: Any, *, index: int, axis: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise LineGraphDataError(f"point {index} {axis} must be numeric, got {type(value).__name__}")
    if isinstance(value, np.complexfloating):
        raise LineGraphDataError(f"point {index} {axis} must be real, got complex")
    return float(value)
