from __future__ import annotations

import json
from pathlib import Path

from domain.models import GroupMetrics
from domain.ports import ReportSink

from .serialization import group_metrics_to_dict


class JsonReportSink(ReportSink):
    def __init__(self, path: str, *, indent: int = 2):
        self.path = path
        self.indent = indent

    def handle(self, metrics: GroupMetrics) -> None:
        p = Path(self.path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(
            json.dumps(group_metrics_to_dict(metrics), indent=self.indent),
            encoding="utf-8",
        )
