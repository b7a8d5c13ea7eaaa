# depconie/extraction/binary.py
import logging
from typing import List

from depconie.core.data_structures import Span, Triple
from depconie.core.interfaces import BaseRelationExtractor
from depconie.extraction.extractor import Extractor
from depconie.tree.parse_tree import DependencyParseTree

logger = logging.getLogger(__name__)


class BinaryExtractor(Extractor[DependencyParseTree, Triple, Triple]):
    """
    Собирает тройки: для каждого отношения из внешнего извлекателя -
    все сочетания найденных подлежащих и дополнений.
    """

    def __init__(self, relation_extractor: BaseRelationExtractor,
                 arg1_extractor: Extractor[Span, object, Span],
                 arg2_extractor: Extractor[Span, object, Span]):
        super().__init__()
        self.relation_extractor = relation_extractor
        self.arg1_extractor = arg1_extractor
        self.arg2_extractor = arg2_extractor

    def extract_candidates(self, tree: DependencyParseTree) -> List[Triple]:
        triples = []
        for relation in self.relation_extractor.extract(tree):
            triples.extend(self.assemble(relation))
        return triples

    def assemble(self, relation: Span) -> List[Triple]:
        arg1s = self.arg1_extractor.extract(relation)
        arg2s = self.arg2_extractor.extract(relation)
        logger.debug(f"Relation '{relation.text}': {len(arg1s)} subjects x {len(arg2s)} objects")
        return Triple.product_of_args(relation, arg1s, arg2s)
