# depconie/tree/parse_tree.py
import logging
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from depconie import labels
from depconie.core.errors import MalformedNodeError
from depconie.tree.node import Node, NodeData

logger = logging.getLogger(__name__)

# (id, содержимое, метка к родителю, id родителя или None для корня)
NodeEntry = Tuple[int, NodeData, str, Optional[int]]


class DependencyParseTree:
    """
    Дерево зависимостей одного предложения.

    Арена узлов с доступом по id (id = позиция слева направо). Дерево
    неизменяемо после build(): все операции только читают.
    """

    def __init__(self, sent_id: Optional[str] = None, text: Optional[str] = None):
        self.sent_id = sent_id
        self.text = text
        self.nodes: Dict[int, Node] = {}
        self.root: Optional[Node] = None

    @classmethod
    def build(cls, entries: Iterable[NodeEntry], sent_id: Optional[str] = None,
              text: Optional[str] = None) -> "DependencyParseTree":
        """
        Собирает дерево из плоского списка узлов.
        Проверяет: уникальность id, ровно один корень, существование родителей, ацикличность.
        """
        tree = cls(sent_id=sent_id, text=text)
        heads: Dict[int, Optional[int]] = {}

        for node_id, data, label, head_id in entries:
            if node_id in tree.nodes:
                raise MalformedNodeError("Duplicate node id", str(node_id))
            tree.nodes[node_id] = Node(node_id, data, label, tree)
            heads[node_id] = head_id

        roots = [node_id for node_id, head_id in heads.items() if head_id is None]
        if len(roots) != 1:
            raise MalformedNodeError(f"Expected exactly one root, found {len(roots)}", str(sent_id))

        for node_id in sorted(heads):
            head_id = heads[node_id]
            if head_id is None:
                continue
            if head_id not in tree.nodes:
                raise MalformedNodeError(
                    f"Head {head_id} of node {node_id} does not exist",
                    tree.nodes[node_id].data.data_string()
                )
            tree.nodes[node_id].parent_id = head_id
            # Обход по возрастанию id - дети сразу упорядочены слева направо
            tree.nodes[head_id].child_ids.append(node_id)

        tree.root = tree.nodes[roots[0]]
        tree._check_connected()
        return tree

    def _check_connected(self):
        # Каждый узел имеет одного родителя, значит недостижимый из корня узел лежит на цикле
        graph = nx.DiGraph()
        graph.add_nodes_from(self.nodes)
        graph.add_edges_from((n.parent_id, n.id) for n in self.nodes.values() if n.parent_id is not None)

        reachable = nx.descendants(graph, self.root.id) | {self.root.id}
        unreachable = sorted(set(self.nodes) - reachable)
        if unreachable:
            node = self.nodes[unreachable[0]]
            raise MalformedNodeError(
                f"Node {node.id} is not reachable from the root (cycle)", node.data.data_string()
            )

    # --- Доступ к узлам ---

    def __getitem__(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def __contains__(self, node_id: int) -> bool:
        return node_id in self.nodes

    def __len__(self):
        return len(self.nodes)

    def ids(self) -> List[int]:
        return sorted(self.nodes)

    def leaves(self) -> List[Node]:
        """Токены предложения слева направо."""
        return [self.nodes[i] for i in sorted(self.nodes) if self.nodes[i].is_leaf()]

    def find(self, ids: Iterable[int]) -> List[Node]:
        """Переводит id обратно в узлы (в порядке слева направо). Неизвестные id пропускаются."""
        return [self.nodes[i] for i in sorted(set(ids)) if i in self.nodes]

    # --- Навигация ---

    def parent(self, node: Node) -> Optional[Node]:
        if node.parent_id is None:
            return None
        return self.nodes[node.parent_id]

    def children(self, node: Node) -> List[Node]:
        return [self.nodes[i] for i in node.child_ids]

    def children_of_type(self, node: Node, label: str) -> List[Node]:
        return [c for c in self.children(node) if c.label_to_parent == label]

    def to_subtree_list(self, node: Node) -> List[Node]:
        """Узел и все его потомки в прямом порядке обхода."""
        result = []
        stack = [node]
        while stack:
            current = stack.pop()
            result.append(current)
            stack.extend(reversed(self.children(current)))
        return result

    def comma_before(self, node: Node, node_id: int) -> bool:
        """
        Есть ли запятая строго между позицией node и node_id.
        Запятые у ParZu висят на корне, поэтому ищем по всем токенам, а не в поддереве.
        """
        low, high = sorted((node.id, node_id))
        for leaf in self.leaves():
            if low < leaf.id < high and (
                    leaf.pos == labels.COMMA_TAG or leaf.text == labels.COMMA):
                return True
        return False

    def coordination_chain(self, node: Node, out: List[Node]) -> List[Node]:
        """
        Собирает в out все сочинённые с node узлы (транзитивно).

        ParZu вешает второй конъюнкт либо прямо через 'kon' (перечисление через запятую),
        либо через союз: союз -kon-> первый конъюнкт, конъюнкт -cj-> союз.
        """
        for kon in self.children_of_type(node, labels.COORDINATION):
            conjuncts = self.children_of_type(kon, labels.CONJUNCT)
            if conjuncts:
                for conjunct in conjuncts:
                    out.append(conjunct)
                    self.coordination_chain(conjunct, out)
            elif kon.pos_group != "KON":
                out.append(kon)
                self.coordination_chain(kon, out)
        return out

    def coordination_children(self, node: Node) -> List[Node]:
        """Все узлы поддеревьев, подвешенных к node через сочинительную связь."""
        result = []
        for kon in self.children_of_type(node, labels.COORDINATION):
            result.extend(self.to_subtree_list(kon))
        return result

    def __repr__(self):
        return f"DependencyParseTree(sent_id={self.sent_id!r}, nodes={len(self.nodes)})"
