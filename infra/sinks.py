from __future__ import annotations
from domain.ports import ReportSink
from domain.models import GroupMetrics, GroupMetricsKind

_TITLES = {
    GroupMetricsKind.PRODUCERS: "Producers Results",
    GroupMetricsKind.CONSUMERS: "Consumers Results",
    GroupMetricsKind.PRODUCING_CONSUMERS: "Producing Consumers Results",
    GroupMetricsKind.PRODUCERS_AND_CONSUMERS: "Aggregate Results",
}


def render_group_metrics(metrics: GroupMetrics) -> str:
    s = metrics.summary

    lines = []
    lines.append(
        f"{_TITLES[s.kind]}: "
        f"total throughput: {s.total_throughput_megabytes_per_second:.2f} MB/s, "
        f"{s.total_throughput_messages_per_second:.0f} messages/s, "
        f"average throughput: {s.average_throughput_megabytes_per_second:.2f} MB/s"
    )
    lines.append(
        "  latency (ms): p50 | p90 | p95 | p99 | p999 | p9999 | avg | median"
    )
    lines.append(
        f"  {s.average_p50_latency_ms:>8.3f} | {s.average_p90_latency_ms:>8.3f} | "
        f"{s.average_p95_latency_ms:>8.3f} | {s.average_p99_latency_ms:>8.3f} | "
        f"{s.average_p999_latency_ms:>8.3f} | {s.average_p9999_latency_ms:>8.3f} | "
        f"{s.average_latency_ms:>8.3f} | {s.average_median_latency_ms:>8.3f}"
    )
    lines.append(
        f"  min={s.min_latency_ms:.3f} ms max={s.max_latency_ms:.3f} ms "
        f"std_dev={s.std_dev_latency_ms:.3f} ms"
    )
    lines.append(f"  message batches: {s.total_message_batches:,}")
    lines.append(
        f"  series samples: mb={len(metrics.avg_throughput_mb_ts):,} "
        f"msg={len(metrics.avg_throughput_msg_ts):,} "
        f"latency={len(metrics.avg_latency_ts):,}"
    )
    return "\n".join(lines)


class PrintSink(ReportSink):
    def handle(self, metrics: GroupMetrics) -> None:
        print(render_group_metrics(metrics) + "\n", flush=True)
