from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from domain.classification import ExactCountKindPolicy
from domain.models import GroupMetricsKind, IndividualMetrics, TimeSeries
from domain.stats import max_value, min_value


@dataclass(frozen=True)
class ThroughputAggregate:
    total_mb_s: float
    total_msg_s: float
    avg_mb_s: float
    avg_msg_s: float


@dataclass(frozen=True)
class LatencyAggregate:
    avg_p50: float
    avg_p90: float
    avg_p95: float
    avg_p99: float
    avg_p999: float
    avg_p9999: float
    avg_mean: float
    avg_median: float


class ScalarAggregator:
    """
    Reduz os campos escalares de N IndividualMetrics.

    Percentis são a média dos percentis de cada ator (roll-up), não um
    percentil recalculado sobre as amostras brutas.
    Somas e médias assumem entrada não vazia; min/max tem fallback.
    """

    def __init__(self, policy: Optional[ExactCountKindPolicy] = None):
        self.policy = policy or ExactCountKindPolicy()

    def classify(self, records: Sequence[IndividualMetrics]) -> GroupMetricsKind:
        return self.policy.classify(records)

    @staticmethod
    def aggregate_throughput(records: Sequence[IndividualMetrics]) -> ThroughputAggregate:
        count = float(len(records))
        total_mb = sum(r.summary.throughput_megabytes_per_second for r in records)
        total_msg = sum(r.summary.throughput_messages_per_second for r in records)
        return ThroughputAggregate(
            total_mb_s=total_mb,
            total_msg_s=total_msg,
            avg_mb_s=total_mb / count,
            avg_msg_s=total_msg / count,
        )

    @staticmethod
    def aggregate_latency(records: Sequence[IndividualMetrics]) -> LatencyAggregate:
        count = float(len(records))

        def avg(field: str) -> float:
            return sum(getattr(r.summary, field) for r in records) / count

        return LatencyAggregate(
            avg_p50=avg("p50_latency_ms"),
            avg_p90=avg("p90_latency_ms"),
            avg_p95=avg("p95_latency_ms"),
            avg_p99=avg("p99_latency_ms"),
            avg_p999=avg("p999_latency_ms"),
            avg_p9999=avg("p9999_latency_ms"),
            avg_mean=avg("avg_latency_ms"),
            avg_median=avg("median_latency_ms"),
        )

    @staticmethod
    def min_max_latency(
        records: Sequence[IndividualMetrics],
        fallback_series: TimeSeries,
    ) -> Tuple[float, float]:
        """
        Menor min_latency_ms e maior max_latency_ms dos registros.
        NaN é ignorado; sem valor comparável usa a série de fallback e,
        se ela também estiver vazia, 0.0.
        """
        lo = min_value(r.summary.min_latency_ms for r in records)
        hi = max_value(r.summary.max_latency_ms for r in records)

        if lo is None:
            lo = min_value(fallback_series.values)
        if hi is None:
            hi = max_value(fallback_series.values)

        return (lo if lo is not None else 0.0, hi if hi is not None else 0.0)

    @staticmethod
    def total_message_batches(records: Sequence[IndividualMetrics]) -> int:
        return sum(int(r.summary.total_message_batches) for r in records)
