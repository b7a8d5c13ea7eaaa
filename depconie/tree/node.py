# depconie/tree/node.py
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union, TYPE_CHECKING

from depconie.core.errors import MalformedNodeError

if TYPE_CHECKING:
    from depconie.tree.parse_tree import DependencyParseTree

# Суффикс разрешения неоднозначности после слэша ("NN-subj\/2") отбрасывается
_SUFFIX_SPLIT = re.compile(r"\\?/")

# Группы частей речи STTS в том виде, в каком их пишет ParZu в столбце CPOS
_POS_GROUP_PREFIXES = [
    ("NN", "N"), ("NE", "N"), ("FM", "FM"), ("V", "V"), ("ADJ", "ADJ"),
    ("ADV", "ADV"), ("APPR", "PREP"), ("APPO", "PREP"), ("APZR", "PREP"),
    ("ART", "ART"), ("CARD", "CARD"), ("KO", "KON"), ("PTK", "PTK"),
    ("PROAV", "PROAV"), ("P", "PRO"), ("$", "$"),
]


def pos_group_for(tag: str) -> str:
    """Грубая группа части речи по тегу STTS (NN -> N, VVFIN -> V, ...)."""
    for prefix, group in _POS_GROUP_PREFIXES:
        if tag.startswith(prefix):
            return group
    return tag


@dataclass(frozen=True)
class LeafData:
    """Терминал: словоформа + тег STTS + группа части речи."""
    token: str
    pos: str
    pos_group: str

    def data_string(self) -> str:
        return f"{self.token}/{self.pos}"


@dataclass(frozen=True)
class InnerData:
    """Нетерминал, закодированный как 'feature-label'."""
    feature: str
    label: str = ""

    @classmethod
    def parse(cls, data: str) -> "InnerData":
        data = data.strip()
        if not data:
            raise MalformedNodeError("Empty node data", data)

        # Разбиваем строку на 'feature' и 'label'
        feature, _, rest = data.partition("-")
        if not feature:
            raise MalformedNodeError("Node data without feature", data)

        label = _SUFFIX_SPLIT.split(rest)[0] if rest else ""
        return cls(feature=feature, label=label)

    def data_string(self) -> str:
        if self.feature and self.label:
            return f"{self.feature}-{self.label}"
        return self.label or self.feature


NodeData = Union[LeafData, InnerData]


class Node:
    """
    Вершина дерева зависимостей.

    Узлы хранятся в арене DependencyParseTree: родитель и дети - это только id,
    а не ссылки на объекты. Вся навигация делегируется дереву.
    """

    __slots__ = ("id", "data", "label_to_parent", "parent_id", "child_ids", "_tree")

    def __init__(self, node_id: int, data: NodeData, label_to_parent: str,
                 tree: "DependencyParseTree"):
        self.id = node_id
        self.data = data
        self.label_to_parent = label_to_parent
        self.parent_id: Optional[int] = None
        self.child_ids: List[int] = []
        self._tree = tree

    # --- Возможности узла ---

    def is_leaf(self) -> bool:
        return isinstance(self.data, LeafData)

    def is_inner(self) -> bool:
        return isinstance(self.data, InnerData)

    def match_label(self, labels: Iterable[str]) -> bool:
        return self.label_to_parent in labels

    def match_feature(self, features: Iterable[str]) -> bool:
        return self.is_inner() and self.data.feature in features

    def match_pos_tag(self, pos_tags: Iterable[str]) -> bool:
        return self.is_leaf() and self.data.pos in pos_tags

    @property
    def pos(self) -> str:
        return self.data.pos if self.is_leaf() else ""

    @property
    def pos_group(self) -> str:
        return self.data.pos_group if self.is_leaf() else ""

    @property
    def text(self) -> str:
        return self.data.token if self.is_leaf() else self.data.data_string()

    # --- Навигация (через арену) ---

    @property
    def tree(self) -> "DependencyParseTree":
        return self._tree

    @property
    def parent(self) -> Optional["Node"]:
        return self._tree.parent(self)

    def children(self) -> List["Node"]:
        return self._tree.children(self)

    def children_of_type(self, label: str) -> List["Node"]:
        return self._tree.children_of_type(self, label)

    def to_list(self) -> List["Node"]:
        return self._tree.to_subtree_list(self)

    def comma_before(self, node_id: int) -> bool:
        return self._tree.comma_before(self, node_id)

    def find(self, ids: Iterable[int]) -> List["Node"]:
        return self._tree.find(ids)

    def coordination_chain(self, out: List["Node"]) -> List["Node"]:
        return self._tree.coordination_chain(self, out)

    def coordination_children(self) -> List["Node"]:
        return self._tree.coordination_children(self)

    def __repr__(self):
        return f"Node({self.id}, {self.data.data_string()!r}, {self.label_to_parent!r})"

    def __str__(self):
        return self.text
