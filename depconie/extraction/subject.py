# depconie/extraction/subject.py
import logging
from typing import List

from depconie import labels
from depconie.core.data_structures import Role, Span
from depconie.core.errors import AmbiguousSubjectError
from depconie.extraction.arguments import Argument
from depconie.extraction.extractor import Extractor
from depconie.extraction.mappers import ClosestArgumentMapper, DummyAntecedentFilter

logger = logging.getLogger(__name__)


class SubjectExtractor(Extractor[Span, Argument, Span]):
    """
    Извлекает подлежащее отношения.

    Кандидаты - дети узлов отношения с меткой 'subj' (или дети корня предложения,
    если у самого отношения подлежащего нет). После мапперов должен остаться один корень;
    каждый сочинённый с ним конъюнкт даёт отдельный спан.
    Отсев "пустых" антецедентов входит в цепочку мапперов по умолчанию.
    """

    def __init__(self, strict: bool = False, max_pp_size: int = labels.MAX_PP_SIZE):
        super().__init__()
        self.strict = strict
        self.max_pp_size = max_pp_size
        self.add_mapper(DummyAntecedentFilter())

    def extract_candidates(self, relation: Span) -> List[Argument]:
        # 1. Подлежащее при самом отношении
        subject_nodes = [
            subj
            for node in relation.nodes()
            for subj in node.children_of_type(labels.SUBJECT)
        ]

        # 2. Сочинённые глаголы с общим подлежащим: смотрим на корень предложения
        if not subject_nodes:
            subject_nodes = relation.root.children_of_type(labels.SUBJECT)

        return [
            Argument(node, relation, Role.SUBJECT, max_pp_size=self.max_pp_size)
            for node in subject_nodes
            if node.id not in relation.ids
        ]

    def to_outputs(self, candidates: List[Argument]) -> List[Span]:
        subject = self.resolve_single(candidates)
        return subject.create_spans()

    def resolve_single(self, candidates: List[Argument]) -> Argument:
        """
        Корень подлежащего должен быть один. Если их больше,
        выбирается ближайший к отношению (при равенстве - первый).
        """
        if len(candidates) == 1:
            return candidates[0]

        error = AmbiguousSubjectError([c.root_node.id for c in candidates], candidates[0].relation.ids)
        if self.strict:
            raise error

        chosen = ClosestArgumentMapper().map(candidates)[0]
        logger.warning(f"{error}; using the closest one ({chosen.root_node.id})")
        return chosen

