# depconie/extraction/extractor.py
"""
Каркас извлечения: сначала генерируются кандидаты, затем по очереди
применяется цепочка мапперов (фильтры, ранжирование, выбор лучшего).
"""
import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, TypeVar, Union

logger = logging.getLogger(__name__)

I = TypeVar("I")
C = TypeVar("C")
O = TypeVar("O")

# Оценки - целые числа; MIN_SCORE означает "брать, только если больше ничего нет"
MIN_SCORE = -sys.maxsize


class Mapper(ABC, Generic[C]):
    """Преобразование списка кандидатов. Вызывается как функция."""

    @abstractmethod
    def map(self, candidates: List[C]) -> List[C]:
        pass

    def __call__(self, candidates: List[C]) -> List[C]:
        return self.map(candidates)

    def __repr__(self):
        return self.__class__.__name__


class FilterMapper(Mapper[C]):
    """Оставляет кандидатов, для которых предикат истинен."""

    def __init__(self, predicate: Callable[[C], bool] = None):
        self._predicate = predicate

    def do_filter(self, candidate: C) -> bool:
        return self._predicate(candidate)

    def map(self, candidates: List[C]) -> List[C]:
        return [c for c in candidates if self.do_filter(c)]


class ScoringMapper(Mapper[C]):
    """Упорядочивает кандидатов по убыванию оценки. Сортировка устойчивая."""

    @abstractmethod
    def score(self, candidate: C) -> int:
        pass

    def map(self, candidates: List[C]) -> List[C]:
        return sorted(candidates, key=self.score, reverse=True)


class MaxMapper(ScoringMapper[C]):
    """
    Оставляет единственного кандидата с максимальной оценкой.
    При равенстве побеждает встреченный первым.
    """

    def map(self, candidates: List[C]) -> List[C]:
        best = None
        best_score = None
        for candidate in candidates:
            value = self.score(candidate)
            if best_score is None or value > best_score:
                best, best_score = candidate, value
        return [] if best is None else [best]


MapperLike = Union[Mapper[C], Callable[[List[C]], List[C]]]


class Extractor(ABC, Generic[I, C, O]):
    """
    Базовый извлекатель.
    extract_candidates() порождает кандидатов, extract() прогоняет их через мапперы
    в порядке регистрации и переводит выживших в выходные объекты.
    """

    def __init__(self):
        self.mappers: List[MapperLike] = []

    def add_mapper(self, mapper: MapperLike) -> "Extractor":
        self.mappers.append(mapper)
        return self

    @abstractmethod
    def extract_candidates(self, source: I) -> Iterable[C]:
        pass

    def to_outputs(self, candidates: List[C]) -> List[O]:
        return list(candidates)

    def extract(self, source: I) -> List[O]:
        candidates = list(self.extract_candidates(source))
        for mapper in self.mappers:
            # Пустой список - нормальный результат, а не ошибка
            if not candidates:
                break
            candidates = list(mapper(candidates))
        if not candidates:
            return []
        return self.to_outputs(candidates)
