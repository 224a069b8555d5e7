from __future__ import annotations

import sys
from typing import List, Optional

from config import AppConfig, load_config
from app.group_aggregator import GroupMetricsAggregator
from domain.classification import ExactCountKindPolicy
from domain.models import GroupMetrics
from domain.ports import ReportSink
from infra.clock import SystemClock
from infra.json_report_sink import JsonReportSink
from infra.metrics_loader import load_many
from infra.observers import NoopStageObserver, PrintStageObserver
from infra.series_csv_sink import SeriesCsvSink
from infra.sinks import PrintSink


def build_sinks(cfg: AppConfig) -> List[ReportSink]:
    sinks: List[ReportSink] = []
    if cfg.output.print:
        sinks.append(PrintSink())
    if cfg.output.json_path:
        sinks.append(JsonReportSink(cfg.output.json_path))
    if cfg.output.csv_path:
        sinks.append(SeriesCsvSink(cfg.output.csv_path))
    return sinks


def build_aggregator(cfg: AppConfig) -> GroupMetricsAggregator:
    observer = PrintStageObserver() if cfg.output.log_stages else NoopStageObserver()
    return GroupMetricsAggregator(
        policy=ExactCountKindPolicy(threshold=cfg.aggregation.classification_threshold),
        observer=observer,
        clock=SystemClock(),
    )


def run(cfg: AppConfig) -> Optional[GroupMetrics]:
    aggregator = build_aggregator(cfg)
    window = cfg.aggregation.moving_average_window

    if cfg.input.is_mixed:
        producers = load_many(cfg.input.producers)
        consumers = load_many(cfg.input.consumers)
        print(f"[aggregation] producers={len(producers)} consumers={len(consumers)} window={window}")
        metrics = aggregator.from_producers_and_consumers(producers, consumers, window)
    else:
        actors = load_many(cfg.input.actors)
        print(f"[aggregation] actors={len(actors)} window={window}")
        metrics = aggregator.from_individual_metrics(actors, window)

    if metrics is None:
        print("[aggregation] no records")
        return None

    for sink in build_sinks(cfg):
        sink.handle(metrics)
    return metrics


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else "config.yaml"

    try:
        cfg = load_config(path)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Falha ao carregar config '{path}': {e}") from e

    try:
        run(cfg)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Falha ao agregar métricas: {e}") from e


if __name__ == "__main__":
    main()
