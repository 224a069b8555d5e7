from __future__ import annotations

from typing import Sequence

from domain.models import (
    ActorKind,
    IndividualMetrics,
    IndividualMetricsSummary,
    TimeSeries,
    TimeSeriesKind,
)


def _make_record(
    actor_kind: ActorKind = ActorKind.PRODUCER,
    *,
    actor_id: int = 1,
    mb_s: float = 10.0,
    msg_s: float = 1000.0,
    p50: float = 2.0,
    p90: float = 3.0,
    p95: float = 4.0,
    p99: float = 5.0,
    p999: float = 6.0,
    p9999: float = 7.0,
    avg: float = 2.5,
    median: float = 2.0,
    min_ms: float = 1.0,
    max_ms: float = 9.0,
    batches: int = 100,
    mb_values: Sequence[float] = (10.0, 10.0, 10.0),
    msg_values: Sequence[float] = (1000.0, 1000.0, 1000.0),
    latency_values: Sequence[float] = (2.0, 4.0, 6.0),
) -> IndividualMetrics:
    summary = IndividualMetricsSummary(
        actor_kind=actor_kind,
        actor_id=actor_id,
        total_message_batches=batches,
        throughput_megabytes_per_second=mb_s,
        throughput_messages_per_second=msg_s,
        p50_latency_ms=p50,
        p90_latency_ms=p90,
        p95_latency_ms=p95,
        p99_latency_ms=p99,
        p999_latency_ms=p999,
        p9999_latency_ms=p9999,
        avg_latency_ms=avg,
        median_latency_ms=median,
        min_latency_ms=min_ms,
        max_latency_ms=max_ms,
    )
    return IndividualMetrics(
        summary=summary,
        throughput_mb_ts=TimeSeries.from_values(mb_values, TimeSeriesKind.THROUGHPUT_MB),
        throughput_msg_ts=TimeSeries.from_values(msg_values, TimeSeriesKind.THROUGHPUT_MSG),
        latency_ts=TimeSeries.from_values(latency_values, TimeSeriesKind.LATENCY),
    )


def _latency_series(values: Sequence[float]) -> TimeSeries:
    return TimeSeries.from_values(values, TimeSeriesKind.LATENCY)
