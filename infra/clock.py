from time import perf_counter, time
from domain.ports import Clock


class SystemClock(Clock):
    """
    Epoch em segundos (float), ancorado em time() na criação e avançando
    por perf_counter(): monotônico e com resolução de µs entre etapas.
    """

    def __init__(self):
        self._anchor_epoch = time()
        self._anchor_perf = perf_counter()

    def now_epoch(self) -> float:
        return self._anchor_epoch + (perf_counter() - self._anchor_perf)
