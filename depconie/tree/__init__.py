from depconie.tree.node import InnerData, LeafData, Node, pos_group_for
from depconie.tree.parse_tree import DependencyParseTree
from depconie.tree.readers import from_token_list, read_bracketed, read_conllu

__all__ = [
    "DependencyParseTree", "InnerData", "LeafData", "Node",
    "from_token_list", "pos_group_for", "read_bracketed", "read_conllu",
]
