from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Sequence

from domain.models import TimePoint, TimeSeries, TimeSeriesKind
from domain.ports import SeriesCombinator, SeriesProcessor


def _time_key(time_s: float) -> int:
    # alinhamento por instante, resolução de 1 ms
    return int(round(time_s * 1000.0))


class TimeSeriesCalculator(SeriesCombinator):
    """
    Combina N séries alinhando as amostras pelo instante (time_s).

    - Séries com os mesmos instantes -> soma/média elemento a elemento.
    - Instantes diferentes -> união dos instantes; cada ponto só considera
      as séries que têm amostra naquele instante.
    """

    def aggregate_sum(self, series_list: Sequence[TimeSeries]) -> TimeSeries:
        return self._aggregate(series_list, lambda total, _n: total)

    def aggregate_avg(self, series_list: Sequence[TimeSeries]) -> TimeSeries:
        return self._aggregate(series_list, lambda total, n: total / n)

    @staticmethod
    def _aggregate(
        series_list: Sequence[TimeSeries],
        finish: Callable[[float, int], float],
    ) -> TimeSeries:
        if not series_list:
            return TimeSeries(kind=TimeSeriesKind.LATENCY)

        kind = series_list[0].kind
        sums: Dict[int, float] = {}
        counts: Dict[int, int] = {}
        for series in series_list:
            for p in series.points:
                k = _time_key(p.time_s)
                sums[k] = sums.get(k, 0.0) + p.value
                counts[k] = counts.get(k, 0) + 1

        points = tuple(
            TimePoint(time_s=k / 1000.0, value=finish(sums[k], counts[k]))
            for k in sorted(sums)
        )
        return TimeSeries(kind=kind, points=points)


class MovingAverageProcessor(SeriesProcessor):
    """Média móvel simples (janela à esquerda); bordas usam janela parcial."""

    def __init__(self, window_size: int):
        if int(window_size) < 1:
            raise ValueError(f"window_size deve ser >= 1 (recebido {window_size})")
        self.window_size = int(window_size)

    def process(self, series: TimeSeries) -> TimeSeries:
        # soma da janela recalculada a cada ponto
        window: Deque[float] = deque(maxlen=self.window_size)
        out = []
        for p in series.points:
            window.append(p.value)
            out.append(TimePoint(time_s=p.time_s, value=sum(window) / len(window)))
        return TimeSeries(kind=series.kind, points=tuple(out))
