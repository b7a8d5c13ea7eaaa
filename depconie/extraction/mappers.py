# depconie/extraction/mappers.py
import logging
from typing import Optional

from depconie import labels
from depconie.core.interfaces import CaseOracle
from depconie.extraction.arguments import Argument
from depconie.extraction.extractor import FilterMapper, MaxMapper, MIN_SCORE

logger = logging.getLogger(__name__)


class ValidArgumentFilter(FilterMapper[Argument]):
    """Отбрасывает аргументы без существительного (пунктуация, числа)."""

    def do_filter(self, candidate: Argument) -> bool:
        return candidate.is_valid()


class DummyAntecedentFilter(FilterMapper[Argument]):
    """
    Подлежащее - не имя собственное, у которого кроме относительного придаточного
    почти ничего нет, - на деле голова определения, а не аргумент.
    Пример: Zahlungstag ist der Tag, an dem alle Mitarbeiter ihr Geld bekommen.
    """

    def do_filter(self, candidate: Argument) -> bool:
        return (not candidate.has_relative_clause()
                or candidate.root_node.pos == labels.PROPER_NOUN)


class ClosestArgumentMapper(MaxMapper[Argument]):
    """Выбирает аргумент, ближайший к левому краю отношения."""

    def score(self, candidate: Argument) -> int:
        return -candidate.distance_to_relation()


class ClosestNominativeArgumentMapper(MaxMapper[Argument]):
    """
    Выбирает аргумент в именительном падеже, ближайший к отношению.

    Если хоть одно существительное спана не в именительном, оценка - MIN_SCORE
    независимо от расстояния. Без оракула работает как ClosestArgumentMapper.
    """

    def __init__(self, oracle: Optional[CaseOracle]):
        self.oracle = oracle

    def is_nominative(self, candidate: Argument) -> bool:
        for node in candidate.root_node.find(candidate.ids()):
            if node.pos in labels.NOUN_TAGS and not self.oracle.is_nominative(node.text):
                return False
        return True

    def score(self, candidate: Argument) -> int:
        if self.oracle is not None and not self.is_nominative(candidate):
            return MIN_SCORE
        # Минус расстояние: ближний кандидат получает большую оценку
        return -candidate.distance_to_relation()
