from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List

from domain.models import GroupMetrics, TimeSeries
from domain.ports import ReportSink

HEADER = ["time_s", "throughput_mb_s", "throughput_msg_s", "latency_ms"]


class SeriesCsvSink(ReportSink):
    """
    Escreve as três séries combinadas em um CSV, uma linha por instante.
    Instante ausente em alguma série -> célula vazia.
    """

    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    @staticmethod
    def _by_time(series: TimeSeries) -> Dict[float, float]:
        return {p.time_s: p.value for p in series.points}

    def _rows(self, metrics: GroupMetrics) -> List[List[object]]:
        mb = self._by_time(metrics.avg_throughput_mb_ts)
        msg = self._by_time(metrics.avg_throughput_msg_ts)
        lat = self._by_time(metrics.avg_latency_ts)

        def cell(d: Dict[float, float], t: float) -> object:
            return d.get(t, "")

        times = sorted(set(mb) | set(msg) | set(lat))
        return [[t, cell(mb, t), cell(msg, t), cell(lat, t)] for t in times]

    def handle(self, metrics: GroupMetrics) -> None:
        p = Path(self.csv_path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(HEADER)
            w.writerows(self._rows(metrics))
