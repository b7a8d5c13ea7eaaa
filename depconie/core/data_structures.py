# depconie/core/data_structures.py
from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import FrozenSet, Iterable, List, Optional, Tuple, TYPE_CHECKING

from pydantic import BaseModel, model_validator

if TYPE_CHECKING:
    from depconie.tree.node import Node
    from depconie.tree.parse_tree import DependencyParseTree


class Role(str, Enum):
    """Грамматическая роль кандидата в аргументы."""
    SUBJECT = "subject"
    COMPLEMENT = "complement"
    OBJECT = "object"
    PREPOSITIONAL_OBJECT = "prepositional_object"
    BOTH = "both"


@dataclass(frozen=True)
class Span:
    """
    Результат извлечения: набор id узлов одного дерева.
    Предлог задан только у предложных аргументов. Дерево спан не хранит, только ссылается на него.
    """
    tree: "DependencyParseTree"
    ids: FrozenSet[int]
    preposition: Optional["Node"] = None

    def __post_init__(self):
        object.__setattr__(self, "ids", frozenset(self.ids))
        if not self.ids:
            raise ValueError("Span must contain at least one node id")
        unknown = sorted(i for i in self.ids if i not in self.tree)
        if unknown:
            raise ValueError(f"Span ids {unknown} are not part of the tree")

    @property
    def root(self) -> "Node":
        """Корень предложения."""
        return self.tree.root

    @property
    def start(self) -> int:
        """Самая левая позиция спана."""
        return min(self.ids)

    def nodes(self) -> List["Node"]:
        return self.tree.find(self.ids)

    def contains(self, node_id: int) -> bool:
        return node_id in self.ids

    @property
    def tokens(self) -> List[str]:
        return [n.text for n in self.nodes() if n.is_leaf()]

    @property
    def text(self) -> str:
        return " ".join(self.tokens)

    def __repr__(self):
        prep = f", preposition={self.preposition.text!r}" if self.preposition is not None else ""
        return f"Span({self.text!r}, ids={sorted(self.ids)}{prep})"


class TripleRecord(BaseModel):
    """Сериализуемое представление тройки для потребителей (базы знаний)."""
    sent_id: Optional[str] = None
    arg1: str
    relation: str
    arg2: str
    arg1_ids: List[int]
    relation_ids: List[int]
    arg2_ids: List[int]
    preposition_id: Optional[int] = None

    @model_validator(mode='after')
    def check_ids(self):
        for name in ("arg1_ids", "relation_ids", "arg2_ids"):
            if not getattr(self, name):
                raise ValueError(f"Empty {name} in triple '{self.arg1} | {self.relation} | {self.arg2}'")
        return self


@dataclass(frozen=True)
class Triple:
    """Бинарное извлечение (arg1, relation, arg2) над одним деревом."""
    relation: Span
    arg1: Span
    arg2: Span

    @staticmethod
    def product_of_args(relation: Span, arg1s: Iterable[Span], arg2s: Iterable[Span]) -> List["Triple"]:
        """Декартово произведение подлежащих и дополнений при одном отношении."""
        return [Triple(relation, arg1, arg2) for arg1, arg2 in product(list(arg1s), list(arg2s))]

    @property
    def relation_text(self) -> str:
        # Предлог аргумента отходит к отношению: "bekommen an"
        if self.arg2.preposition is not None:
            return f"{self.relation.text} {self.arg2.preposition.text}"
        return self.relation.text

    def render(self) -> Tuple[str, str, str]:
        return self.arg1.text, self.relation_text, self.arg2.text

    def to_record(self) -> TripleRecord:
        preposition = self.arg2.preposition
        return TripleRecord(
            sent_id=self.relation.tree.sent_id,
            arg1=self.arg1.text,
            relation=self.relation_text,
            arg2=self.arg2.text,
            arg1_ids=sorted(self.arg1.ids),
            relation_ids=sorted(self.relation.ids),
            arg2_ids=sorted(self.arg2.ids),
            preposition_id=preposition.id if preposition is not None else None,
        )

    def __str__(self):
        return "({}; {}; {})".format(*self.render())
