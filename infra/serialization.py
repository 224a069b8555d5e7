from __future__ import annotations

from dataclasses import asdict, fields
from enum import Enum
from typing import Any, Dict, Mapping

from domain.models import (
    ActorKind,
    GroupMetrics,
    IndividualMetrics,
    IndividualMetricsSummary,
    TimePoint,
    TimeSeries,
    TimeSeriesKind,
)


def _plain(x: Any) -> Any:
    if isinstance(x, Enum):
        return x.value
    if isinstance(x, dict):
        return {k: _plain(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [_plain(v) for v in x]
    return x


def group_metrics_to_dict(metrics: GroupMetrics) -> Dict[str, Any]:
    return _plain(asdict(metrics))


def individual_metrics_to_dict(metrics: IndividualMetrics) -> Dict[str, Any]:
    return _plain(asdict(metrics))


def _enum(enum_cls, raw: Any, where: str):
    try:
        return enum_cls(raw)
    except ValueError as e:
        raise ValueError(f"{where}: valor inválido {raw!r} para {enum_cls.__name__}") from e


def time_series_from_dict(d: Mapping[str, Any], default_kind: TimeSeriesKind, where: str) -> TimeSeries:
    kind = _enum(TimeSeriesKind, d["kind"], f"{where}.kind") if "kind" in d else default_kind
    points = []
    for i, p in enumerate(d.get("points") or []):
        try:
            points.append(TimePoint(time_s=float(p["time_s"]), value=float(p["value"])))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"{where}.points[{i}] precisa de time_s e value numéricos") from e
    return TimeSeries(kind=kind, points=tuple(points))


def individual_metrics_from_dict(d: Mapping[str, Any], where: str = "metrics") -> IndividualMetrics:
    raw_summary = d.get("summary")
    if not isinstance(raw_summary, Mapping):
        raise ValueError(f"{where}: campo obrigatório 'summary' ausente.")
    if "actor_kind" not in raw_summary:
        raise ValueError(f"{where}: campo obrigatório 'summary.actor_kind' ausente.")

    kwargs: Dict[str, Any] = {}
    for f in fields(IndividualMetricsSummary):
        if f.name not in raw_summary:
            continue
        raw = raw_summary[f.name]
        if f.name == "actor_kind":
            kwargs[f.name] = _enum(ActorKind, raw, f"{where}.summary.actor_kind")
            continue
        try:
            kwargs[f.name] = int(raw) if isinstance(f.default, int) else float(raw)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{where}.summary.{f.name}: valor não numérico {raw!r}") from e

    series = {}
    for name, kind in (
        ("throughput_mb_ts", TimeSeriesKind.THROUGHPUT_MB),
        ("throughput_msg_ts", TimeSeriesKind.THROUGHPUT_MSG),
        ("latency_ts", TimeSeriesKind.LATENCY),
    ):
        raw_ts = d.get(name)
        if raw_ts is None:
            series[name] = TimeSeries(kind=kind)
        elif isinstance(raw_ts, Mapping):
            series[name] = time_series_from_dict(raw_ts, kind, f"{where}.{name}")
        else:
            raise ValueError(f"{where}.{name} deve ser um objeto.")

    return IndividualMetrics(summary=IndividualMetricsSummary(**kwargs), **series)
