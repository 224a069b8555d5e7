from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import ActorKind, GroupMetricsKind, IndividualMetrics

_KIND_BY_ACTOR = {
    ActorKind.PRODUCER: GroupMetricsKind.PRODUCERS,
    ActorKind.CONSUMER: GroupMetricsKind.CONSUMERS,
    ActorKind.PRODUCING_CONSUMER: GroupMetricsKind.PRODUCING_CONSUMERS,
}


@dataclass(frozen=True)
class ExactCountKindPolicy:
    """
    Heurística herdada do bench: só usa o tipo do primeiro ator quando o
    grupo tem exatamente `threshold` registros. Qualquer outro tamanho vira
    ProducersAndConsumers.

    Suspeita (não é uma regra do domínio); mantida por compatibilidade.
    """
    threshold: int = 200

    def __post_init__(self) -> None:
        if self.threshold < 1:
            raise ValueError(f"threshold deve ser >= 1 (recebido {self.threshold})")

    def classify(self, records: Sequence[IndividualMetrics]) -> GroupMetricsKind:
        if len(records) != self.threshold:
            return GroupMetricsKind.PRODUCERS_AND_CONSUMERS
        return _KIND_BY_ACTOR[records[0].actor_kind]
