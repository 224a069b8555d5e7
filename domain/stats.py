from __future__ import annotations

import math
from typing import Iterable, List, Optional


def _comparable(values: Iterable[float]) -> List[float]:
    # NaN não entra em min/max
    return [v for v in values if not math.isnan(v)]


def min_value(values: Iterable[float]) -> Optional[float]:
    vs = _comparable(values)
    return min(vs) if vs else None


def max_value(values: Iterable[float]) -> Optional[float]:
    vs = _comparable(values)
    return max(vs) if vs else None


def mean(values: Iterable[float]) -> Optional[float]:
    vs = list(values)
    return sum(vs) / len(vs) if vs else None


def std_dev(values: Iterable[float]) -> Optional[float]:
    """Desvio padrão populacional; None para sequência vazia."""
    vs = list(values)
    m = mean(vs)
    if m is None:
        return None
    variance = sum((v - m) ** 2 for v in vs) / len(vs)
    return math.sqrt(variance)
