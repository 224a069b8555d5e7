from __future__ import annotations
from domain.models import GroupMetricsKind
from domain.ports import StageObserver


class PrintStageObserver(StageObserver):
    def __init__(self, tag: str = "aggregation"):
        self.tag = tag

    def on_stage(self, kind: GroupMetricsKind, event: str, elapsed_us: int) -> None:
        print(f"[{self.tag}] {kind}: {event} @ {elapsed_us} microsec", flush=True)


class NoopStageObserver(StageObserver):
    def on_stage(self, kind: GroupMetricsKind, event: str, elapsed_us: int) -> None:
        pass
