from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass(frozen=True)
class AggregationConfig:
    moving_average_window: int = 20
    classification_threshold: int = 200


@dataclass(frozen=True)
class InputConfig:
    producers: list[str] = field(default_factory=list)
    consumers: list[str] = field(default_factory=list)

    # grupo homogêneo (sem override de tipo)
    actors: list[str] = field(default_factory=list)

    @property
    def is_mixed(self) -> bool:
        return bool(self.producers or self.consumers)


@dataclass(frozen=True)
class OutputConfig:
    print: bool = True
    json_path: str | None = None
    csv_path: str | None = None
    log_stages: bool = False


@dataclass(frozen=True)
class AppConfig:
    input: InputConfig
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _req(d: Mapping[str, Any], path: str) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, Mapping) or part not in cur:
            raise ValueError(f"Config inválida: campo obrigatório '{path}' ausente.")
        cur = cur[part]
    return cur


def _opt(d: Mapping[str, Any], path: str, default: Any) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, Mapping) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _to_int(x: Any, path: str, minimum: int) -> int:
    try:
        v = int(x)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Config inválida: '{path}' deve ser inteiro (recebido {x!r}).") from e
    if v < minimum:
        raise ValueError(f"Config inválida: '{path}' deve ser >= {minimum} (recebido {v}).")
    return v


def _to_path_list(x: Any, path: str) -> list[str]:
    if x is None:
        return []
    if not isinstance(x, list):
        raise ValueError(f"Config inválida: '{path}' deve ser uma lista de caminhos.")
    return [str(p) for p in x]


def _opt_str(x: Any) -> str | None:
    if x is None:
        return None
    s = str(x).strip()
    return s or None


def load_config(path: str = "config.yaml") -> AppConfig:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return config_from_mapping(data)


def config_from_mapping(data: Mapping[str, Any]) -> AppConfig:
    # ---- aggregation ----
    window = _to_int(
        _opt(data, "aggregation.moving_average_window", 20),
        "aggregation.moving_average_window",
        minimum=1,
    )
    threshold = _to_int(
        _opt(data, "aggregation.classification_threshold", 200),
        "aggregation.classification_threshold",
        minimum=1,
    )

    # ---- input ----
    in_raw = _req(data, "input")
    if not isinstance(in_raw, Mapping):
        raise ValueError("Config inválida: 'input' deve ser um mapa (dict).")

    producers = _to_path_list(_opt(in_raw, "producers", None), "input.producers")
    consumers = _to_path_list(_opt(in_raw, "consumers", None), "input.consumers")
    actors = _to_path_list(_opt(in_raw, "actors", None), "input.actors")

    if actors and (producers or consumers):
        raise ValueError(
            "Config inválida: 'input.actors' não pode ser combinado com "
            "'input.producers'/'input.consumers'."
        )
    if not (actors or producers or consumers):
        raise ValueError("Config inválida: nenhum arquivo de métricas em 'input'.")

    # ---- output (opcional) ----
    out_raw = _opt(data, "output", None)
    output = OutputConfig()
    if isinstance(out_raw, Mapping):
        output = OutputConfig(
            print=bool(_opt(out_raw, "print", True)),
            json_path=_opt_str(_opt(out_raw, "json_path", None)),
            csv_path=_opt_str(_opt(out_raw, "csv_path", None)),
            log_stages=bool(_opt(out_raw, "log_stages", False)),
        )
    elif out_raw is not None:
        raise ValueError("Config inválida: 'output' deve ser um mapa (dict).")

    return AppConfig(
        input=InputConfig(producers=producers, consumers=consumers, actors=actors),
        aggregation=AggregationConfig(
            moving_average_window=window,
            classification_threshold=threshold,
        ),
        output=output,
    )
