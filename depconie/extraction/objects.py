# depconie/extraction/objects.py
import logging
from typing import List

from depconie import labels
from depconie.core.data_structures import Span
from depconie.extraction.arguments import Argument, classify, object_roles
from depconie.extraction.extractor import Extractor
from depconie.extraction.mappers import ValidArgumentFilter

logger = logging.getLogger(__name__)


class ObjectExtractor(Extractor[Span, Argument, Span]):
    """
    Извлекает дополнения отношения: прямые/косвенные объекты, предикативы,
    предложные объекты. Все валидные кандидаты сохраняются, каждый сочинённый
    конъюнкт даёт свой спан.
    Кандидаты без существительного отсекаются фильтром по умолчанию.
    """

    def __init__(self, max_pp_size: int = labels.MAX_PP_SIZE):
        super().__init__()
        self.max_pp_size = max_pp_size
        self.labels = object_roles()
        self.add_mapper(ValidArgumentFilter())

    def extract_candidates(self, relation: Span) -> List[Argument]:
        candidates = []
        for node in relation.nodes():
            for child in node.children():
                if child.id in relation.ids or child.label_to_parent not in self.labels:
                    continue
                candidates.extend(classify(child, relation, self.max_pp_size))

        logger.debug(f"Relation '{relation.text}': {len(candidates)} object candidates")
        return candidates

    def to_outputs(self, candidates: List[Argument]) -> List[Span]:
        spans = []
        for argument in candidates:
            spans.extend(argument.create_spans())
        return spans
