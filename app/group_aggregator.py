from __future__ import annotations

import time
from typing import Callable, Optional, Sequence, Tuple

from domain.classification import ExactCountKindPolicy
from domain.models import (
    GroupMetrics,
    GroupMetricsKind,
    GroupMetricsSummary,
    IndividualMetrics,
    TimeSeries,
)
from domain.ports import Clock, SeriesCombinator, SeriesProcessor, StageObserver
from domain.stats import std_dev

from .scalar_aggregator import ScalarAggregator
from .timeseries import MovingAverageProcessor, TimeSeriesCalculator


class GroupMetricsAggregator:
    """
    Agrega métricas individuais de atores em um GroupMetrics.

    Etapas:
      1) classificação do grupo
      2) throughput (somas/médias)
      3) latência (média dos percentis)
      4) séries combinadas (throughput = soma, latência = média) + média móvel
      5) min/max de latência (fallback = série de latência suavizada)
      6) desvio padrão da série de latência suavizada

    Cada etapa é reportada ao observer (opcional) com o tempo acumulado em µs.
    """

    def __init__(
        self,
        *,
        policy: Optional[ExactCountKindPolicy] = None,
        combinator: Optional[SeriesCombinator] = None,
        processor_factory: Optional[Callable[[int], SeriesProcessor]] = None,
        observer: Optional[StageObserver] = None,
        clock: Optional[Clock] = None,
    ):
        self.scalars = ScalarAggregator(policy)
        self.combinator = combinator or TimeSeriesCalculator()
        # janela -> processador de suavização
        self.processor_factory = processor_factory or MovingAverageProcessor
        self.observer = observer
        self._now = clock.now_epoch if clock is not None else time.time

    def from_individual_metrics(
        self,
        records: Sequence[IndividualMetrics],
        smoothing_window: int,
    ) -> Optional[GroupMetrics]:
        if not records:
            return None

        started = self._now()

        kind = self.scalars.classify(records)
        self._stage(kind, f"Completed classification (len {len(records)})", started)

        throughput = self.scalars.aggregate_throughput(records)
        self._stage(kind, "Completed throughput aggregation", started)

        latency = self.scalars.aggregate_latency(records)
        self._stage(kind, "Completed latency aggregation", started)

        mb_ts, msg_ts, lat_ts = self._group_time_series(records, smoothing_window)
        self._stage(kind, "Completed group time series", started)

        min_ms, max_ms = self.scalars.min_max_latency(records, lat_ts)
        self._stage(kind, "Completed min/max latency", started)

        sd = std_dev(lat_ts.values)

        summary = GroupMetricsSummary(
            kind=kind,
            total_throughput_megabytes_per_second=throughput.total_mb_s,
            total_throughput_messages_per_second=throughput.total_msg_s,
            average_throughput_megabytes_per_second=throughput.avg_mb_s,
            average_throughput_messages_per_second=throughput.avg_msg_s,
            average_p50_latency_ms=latency.avg_p50,
            average_p90_latency_ms=latency.avg_p90,
            average_p95_latency_ms=latency.avg_p95,
            average_p99_latency_ms=latency.avg_p99,
            average_p999_latency_ms=latency.avg_p999,
            average_p9999_latency_ms=latency.avg_p9999,
            average_latency_ms=latency.avg_mean,
            average_median_latency_ms=latency.avg_median,
            min_latency_ms=min_ms,
            max_latency_ms=max_ms,
            std_dev_latency_ms=sd if sd is not None else 0.0,
            total_message_batches=self.scalars.total_message_batches(records),
        )
        self._stage(kind, "Completed group metrics", started)

        return GroupMetrics(
            summary=summary,
            avg_throughput_mb_ts=mb_ts,
            avg_throughput_msg_ts=msg_ts,
            avg_latency_ts=lat_ts,
        )

    def from_producers_and_consumers(
        self,
        producer_records: Sequence[IndividualMetrics],
        consumer_records: Sequence[IndividualMetrics],
        smoothing_window: int,
    ) -> Optional[GroupMetrics]:
        # produtores primeiro; o tipo é sempre sobrescrito (ignora a heurística)
        metrics = self.from_individual_metrics(
            [*producer_records, *consumer_records],
            smoothing_window,
        )
        if metrics is None:
            return None
        return metrics.with_kind(GroupMetricsKind.PRODUCERS_AND_CONSUMERS)

    def _group_time_series(
        self,
        records: Sequence[IndividualMetrics],
        smoothing_window: int,
    ) -> Tuple[TimeSeries, TimeSeries, TimeSeries]:
        smoother = self.processor_factory(smoothing_window)

        mb_ts = self.combinator.aggregate_sum([r.throughput_mb_ts for r in records])
        msg_ts = self.combinator.aggregate_sum([r.throughput_msg_ts for r in records])
        lat_ts = self.combinator.aggregate_avg([r.latency_ts for r in records])

        return smoother.process(mb_ts), smoother.process(msg_ts), smoother.process(lat_ts)

    def _stage(self, kind: GroupMetricsKind, event: str, started: float) -> None:
        if self.observer is None:
            return
        elapsed_us = int((self._now() - started) * 1_000_000)
        self.observer.on_stage(kind, event, elapsed_us)


def from_individual_metrics(
    records: Sequence[IndividualMetrics],
    smoothing_window: int,
) -> Optional[GroupMetrics]:
    return GroupMetricsAggregator().from_individual_metrics(records, smoothing_window)


def from_producers_and_consumers(
    producer_records: Sequence[IndividualMetrics],
    consumer_records: Sequence[IndividualMetrics],
    smoothing_window: int,
) -> Optional[GroupMetrics]:
    return GroupMetricsAggregator().from_producers_and_consumers(
        producer_records, consumer_records, smoothing_window
    )
