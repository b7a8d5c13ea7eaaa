# depconie/extraction/arguments.py
import re
from typing import Callable, Dict, List, Optional, Set, Tuple

from depconie import labels
from depconie.core.data_structures import Role, Span
from depconie.tree.node import Node

_LETTER = re.compile(r"[A-Za-zäöüßÄÖÜ]")


class Argument:
    """
    Кандидат в аргумент: корневой узел + отношение, к которому он примеряется.

    Роль и предлог зависят от варианта (см. classify), а построение спана,
    расстояние до отношения и проверка валидности общие для всех ролей.
    """

    def __init__(self, root_node: Node, relation: Span, role: Role,
                 preposition: Optional[Node] = None, max_pp_size: int = labels.MAX_PP_SIZE):
        self.root_node = root_node
        self.relation = relation
        self.role = role
        self.preposition = preposition
        self.max_pp_size = max_pp_size

    @property
    def name(self) -> str:
        return self.role.value

    # --- Расстояние ---

    def relation_position(self) -> int:
        """Позиция самого левого токена отношения."""
        return min(self.relation.ids)

    def distance_to_relation(self) -> int:
        return abs(self.relation_position() - self.root_node.id)

    # --- Построение спана ---

    def ids(self, node: Optional[Node] = None, remove_conjuncts: bool = True) -> List[int]:
        """
        id узлов аргумента с корнем node (по умолчанию - корень кандидата).

        Из поддерева удаляются: сочинённые конъюнкты, PP с местоименным наречием
        или длиннее max_pp_size (кроме подлежащего), приложения после запятой, придаточные.
        """
        node = node or self.root_node
        removed: Set[int] = set()
        if remove_conjuncts:
            removed.update(n.id for n in node.coordination_children())

        for child in node.to_list()[1:]:
            if child.id in removed:
                continue
            if self._is_pruned(node, child):
                removed.update(n.id for n in child.to_list())

        return [n.id for n in node.to_list() if n.id not in removed]

    def _is_pruned(self, root: Node, child: Node) -> bool:
        label = child.label_to_parent
        if label == labels.PREPOSITIONAL_PHRASE:
            # У подлежащего PP не подрезаются
            if self.role is Role.SUBJECT:
                return False
            return child.pos == labels.PRONOMINAL_ADVERB or len(child.to_list()) > self.max_pp_size
        if label == labels.APPOSITION:
            return root.comma_before(child.id)
        return label in labels.CLAUSE_LABELS

    def resolve_conjunction(self) -> List[Node]:
        """Узлы, сочинённые с корнем кандидата."""
        return self.root_node.coordination_chain([])

    def create_spans(self) -> List[Span]:
        """Спан основного аргумента и по спану на каждый конъюнкт, с тем же предлогом."""
        tree = self.relation.tree
        spans = [Span(tree, self.ids(self.root_node), self.preposition)]
        spans.extend(Span(tree, self.ids(kon), self.preposition) for kon in self.resolve_conjunction())
        return spans

    # --- Проверки ---

    def has_relative_clause(self) -> bool:
        """
        Корень - "пустой" антецедент: не больше двух детей, один из которых относительное придаточное.
        """
        return not (len(self.root_node.children()) > 2
                    or not self.root_node.children_of_type(labels.RELATIVE_CLAUSE))

    def contains_noun(self) -> bool:
        """В спане есть существительное, в написании которого есть хотя бы одна буква."""
        for node in self.root_node.find(self.ids()):
            if node.pos_group in labels.NOUN_GROUPS and _LETTER.search(node.text):
                return True
        return False

    def is_valid(self) -> bool:
        return self.contains_noun()

    def __repr__(self):
        return f"Argument({self.name}, root={self.root_node!r}, distance={self.distance_to_relation()})"


# ============================================================
# Варианты: роль и поиск предлога по метке корня
# ============================================================

def _no_preposition(node: Node) -> List[Tuple[Node, Optional[Node]]]:
    return [(node, None)]


def _governed_noun(node: Node) -> List[Tuple[Node, Optional[Node]]]:
    """Предлог - сам узел PP, аргумент - его именная часть ('pn')."""
    nouns = node.children_of_type(labels.PREPOSITION_NOUN)
    if not nouns:
        return [(node, None)]
    return [(noun, node) for noun in nouns]


_VARIANTS: Dict[str, Tuple[Role, Callable[[Node], List[Tuple[Node, Optional[Node]]]]]] = {
    labels.SUBJECT: (Role.SUBJECT, _no_preposition),
    labels.COMPLEMENT: (Role.COMPLEMENT, _no_preposition),
    labels.PREPOSITIONAL_PHRASE: (Role.PREPOSITIONAL_OBJECT, _governed_noun),
    labels.PREPOSITIONAL_OBJECT: (Role.BOTH, _governed_noun),
}
_VARIANTS.update({label: (Role.OBJECT, _no_preposition) for label in labels.OBJECT_LABELS})


def classify(node: Node, relation: Span, max_pp_size: int = labels.MAX_PP_SIZE) -> List[Argument]:
    """
    Превращает ребёнка узла отношения в кандидатов-аргументов.
    Узел с меткой, не задающей роль, кандидатов не даёт.
    """
    variant = _VARIANTS.get(node.label_to_parent)
    if variant is None:
        return []
    role, lookup = variant
    return [Argument(root, relation, role, preposition, max_pp_size) for root, preposition in lookup(node)]


def object_roles() -> Set[str]:
    """Метки, которые дают кандидатов во второй аргумент."""
    return {label for label, (role, _) in _VARIANTS.items() if role is not Role.SUBJECT}
