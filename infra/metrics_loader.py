from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from domain.models import IndividualMetrics

from .serialization import individual_metrics_from_dict


def load_individual_metrics(path: str) -> IndividualMetrics:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Arquivo de métricas inválido: '{path}' ({e})") from e
    if not isinstance(data, dict):
        raise ValueError(f"Arquivo de métricas inválido: '{path}' deve conter um objeto.")
    return individual_metrics_from_dict(data, where=str(path))


def load_many(paths: Iterable[str]) -> List[IndividualMetrics]:
    # mantém a ordem dos arquivos
    return [load_individual_metrics(p) for p in paths]
