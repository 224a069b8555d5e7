from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Tuple


class ActorKind(Enum):
    PRODUCER = "Producer"
    CONSUMER = "Consumer"
    PRODUCING_CONSUMER = "ProducingConsumer"


class GroupMetricsKind(Enum):
    PRODUCERS = "Producers"
    CONSUMERS = "Consumers"
    PRODUCING_CONSUMERS = "ProducingConsumers"
    PRODUCERS_AND_CONSUMERS = "ProducersAndConsumers"

    def __str__(self) -> str:
        return self.value


class TimeSeriesKind(Enum):
    THROUGHPUT_MB = "ThroughputMB"
    THROUGHPUT_MSG = "ThroughputMsg"
    LATENCY = "Latency"


@dataclass(frozen=True)
class TimePoint:
    time_s: float
    value: float


@dataclass(frozen=True)
class TimeSeries:
    kind: TimeSeriesKind
    points: Tuple[TimePoint, ...] = ()

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        kind: TimeSeriesKind,
        interval_s: float = 1.0,
    ) -> "TimeSeries":
        # amostra i no instante (i+1)*interval, igual ao coletor do bench
        return cls(
            kind=kind,
            points=tuple(
                TimePoint(time_s=(i + 1) * interval_s, value=float(v))
                for i, v in enumerate(values)
            ),
        )

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.points]

    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class IndividualMetricsSummary:
    actor_kind: ActorKind
    actor_id: int = 0

    total_time_secs: float = 0.0
    total_user_data_bytes: int = 0
    total_bytes: int = 0
    total_messages: int = 0
    total_message_batches: int = 0

    throughput_megabytes_per_second: float = 0.0
    throughput_messages_per_second: float = 0.0

    p50_latency_ms: float = 0.0
    p90_latency_ms: float = 0.0
    p95_latency_ms: float = 0.0
    p99_latency_ms: float = 0.0
    p999_latency_ms: float = 0.0
    p9999_latency_ms: float = 0.0
    avg_latency_ms: float = 0.0
    median_latency_ms: float = 0.0
    min_latency_ms: float = 0.0
    max_latency_ms: float = 0.0


@dataclass(frozen=True)
class IndividualMetrics:
    """Resultado de um ator (produtor/consumidor), já calculado upstream."""
    summary: IndividualMetricsSummary
    throughput_mb_ts: TimeSeries = field(
        default_factory=lambda: TimeSeries(TimeSeriesKind.THROUGHPUT_MB)
    )
    throughput_msg_ts: TimeSeries = field(
        default_factory=lambda: TimeSeries(TimeSeriesKind.THROUGHPUT_MSG)
    )
    latency_ts: TimeSeries = field(
        default_factory=lambda: TimeSeries(TimeSeriesKind.LATENCY)
    )

    @property
    def actor_kind(self) -> ActorKind:
        return self.summary.actor_kind


@dataclass(frozen=True)
class GroupMetricsSummary:
    kind: GroupMetricsKind

    total_throughput_megabytes_per_second: float
    total_throughput_messages_per_second: float
    average_throughput_megabytes_per_second: float
    average_throughput_messages_per_second: float

    average_p50_latency_ms: float
    average_p90_latency_ms: float
    average_p95_latency_ms: float
    average_p99_latency_ms: float
    average_p999_latency_ms: float
    average_p9999_latency_ms: float
    average_latency_ms: float
    average_median_latency_ms: float

    min_latency_ms: float
    max_latency_ms: float
    std_dev_latency_ms: float

    total_message_batches: int = 0


@dataclass(frozen=True)
class GroupMetrics:
    summary: GroupMetricsSummary
    avg_throughput_mb_ts: TimeSeries
    avg_throughput_msg_ts: TimeSeries
    avg_latency_ts: TimeSeries

    @property
    def kind(self) -> GroupMetricsKind:
        return self.summary.kind

    def with_kind(self, kind: GroupMetricsKind) -> "GroupMetrics":
        return replace(self, summary=replace(self.summary, kind=kind))
