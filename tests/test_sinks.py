"""Tests for the report sinks and stage observers."""

import csv
import json

from app.group_aggregator import from_individual_metrics, from_producers_and_consumers
from domain.models import ActorKind, GroupMetricsKind
from infra.json_report_sink import JsonReportSink
from infra.observers import NoopStageObserver, PrintStageObserver
from infra.series_csv_sink import HEADER, SeriesCsvSink
from infra.sinks import PrintSink, render_group_metrics

from .helpers import _make_record


def _metrics():
    return from_producers_and_consumers(
        [_make_record()], [_make_record(ActorKind.CONSUMER, mb_s=30.0)], 1
    )


def test_render_contains_totals_and_percentiles():
    text = render_group_metrics(_metrics())
    assert text.startswith("Aggregate Results: total throughput: 40.00 MB/s")
    assert "min=1.000 ms max=9.000 ms" in text
    assert "latency=3" in text
    assert "message batches: 200" in text


def test_render_title_follows_kind():
    m = from_individual_metrics([_make_record(ActorKind.CONSUMER)] * 200, 1)
    assert m.kind is GroupMetricsKind.CONSUMERS
    assert render_group_metrics(m).startswith("Consumers Results")


def test_print_sink(capsys):
    PrintSink().handle(_metrics())
    out = capsys.readouterr().out
    assert "Aggregate Results" in out


def test_json_sink_writes_file(tmp_path):
    path = tmp_path / "nested" / "group.json"
    JsonReportSink(str(path)).handle(_metrics())
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"]["kind"] == "ProducersAndConsumers"
    assert data["summary"]["total_throughput_megabytes_per_second"] == 40.0
    assert len(data["avg_throughput_mb_ts"]["points"]) == 3
    assert data["summary"]["total_message_batches"] == 200


def test_csv_sink_writes_aligned_rows(tmp_path):
    path = tmp_path / "series.csv"
    SeriesCsvSink(str(path)).handle(_metrics())
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == HEADER
    assert len(rows) == 4
    assert [float(x) for x in rows[1]] == [1.0, 20.0, 2000.0, 2.0]


def test_csv_sink_blank_cell_for_missing_sample(tmp_path):
    path = tmp_path / "series.csv"
    m = from_individual_metrics([_make_record(latency_values=(2.0,))], 1)
    SeriesCsvSink(str(path)).handle(m)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[2][3] == ""


def test_print_stage_observer(capsys):
    PrintStageObserver().on_stage(GroupMetricsKind.PRODUCERS, "Completed x", 42)
    assert capsys.readouterr().out == "[aggregation] Producers: Completed x @ 42 microsec\n"


def test_noop_stage_observer(capsys):
    NoopStageObserver().on_stage(GroupMetricsKind.PRODUCERS, "Completed x", 42)
    assert capsys.readouterr().out == ""
