# depconie/core/errors.py
from typing import Iterable, Optional


class DepConIEError(Exception):
    """Базовое исключение пакета."""


class MalformedNodeError(DepConIEError):
    """
    Узел дерева не удалось разобрать.
    Ошибка относится к одному узлу (и его предложению), а не ко всему батчу.
    """

    def __init__(self, message: str, node: Optional[str] = None):
        self.node = node
        if node is not None:
            message = f"{message}: {node!r}"
        super().__init__(message)


class AmbiguousSubjectError(DepConIEError):
    """После фильтрации осталось больше одного корня подлежащего."""

    def __init__(self, candidate_ids: Iterable[int], relation_ids: Iterable[int]):
        self.candidate_ids = list(candidate_ids)
        self.relation_ids = sorted(relation_ids)
        super().__init__(
            f"{len(self.candidate_ids)} subject roots {self.candidate_ids} "
            f"for relation {self.relation_ids}"
        )


class TokenNotFoundError(KeyError):
    """Словоформы нет в морфологическом лексиконе. Сигнал для перехода к запасному оракулу."""


class LexiconLoadError(DepConIEError):
    """Лексикон не найден или имеет неверный формат."""
