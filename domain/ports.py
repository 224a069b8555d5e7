from __future__ import annotations

from typing import Protocol, Sequence

from .models import GroupMetrics, GroupMetricsKind, TimeSeries


class Clock(Protocol):
    def now_epoch(self) -> float: ...


class StageObserver(Protocol):
    """Recebe o tempo decorrido (µs) de cada etapa da agregação."""
    def on_stage(self, kind: GroupMetricsKind, event: str, elapsed_us: int) -> None: ...


class ReportSink(Protocol):
    def handle(self, metrics: GroupMetrics) -> None: ...


# -----------------------------
# Colaboradores de séries temporais
# -----------------------------

class SeriesCombinator(Protocol):
    def aggregate_sum(self, series_list: Sequence[TimeSeries]) -> TimeSeries: ...

    def aggregate_avg(self, series_list: Sequence[TimeSeries]) -> TimeSeries: ...


class SeriesProcessor(Protocol):
    def process(self, series: TimeSeries) -> TimeSeries: ...
