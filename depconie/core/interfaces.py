# depconie/core/interfaces.py
from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from depconie.core.data_structures import Span
    from depconie.tree.parse_tree import DependencyParseTree


class CaseOracle(ABC):
    @abstractmethod
    def is_nominative(self, token: str) -> bool:
        """
        Стоит ли словоформа в именительном падеже.
        Основной оракул может бросить TokenNotFoundError, запасной обязан ответить всегда.
        """
        pass


class BaseRelationExtractor(ABC):
    @abstractmethod
    def extract(self, tree: "DependencyParseTree") -> List["Span"]:
        """
        Принимает дерево зависимостей предложения.
        Возвращает спаны отношений (глагольные группы) над этим же деревом.
        """
        pass
