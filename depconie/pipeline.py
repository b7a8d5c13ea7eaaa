import logging
from typing import Dict, Iterable, List, Optional

from conllu import parse
from tqdm import tqdm

from depconie.config import ExtractorSettings
from depconie.core.data_structures import Triple
from depconie.core.errors import MalformedNodeError
from depconie.core.interfaces import BaseRelationExtractor, CaseOracle
from depconie.extraction.binary import BinaryExtractor
from depconie.extraction.mappers import ClosestNominativeArgumentMapper
from depconie.extraction.objects import ObjectExtractor
from depconie.extraction.subject import SubjectExtractor
from depconie.morphology.lexicon import load_case_oracle
from depconie.tree.parse_tree import DependencyParseTree
from depconie.tree.readers import from_token_list

logger = logging.getLogger(__name__)


class DepConIE:
    """
    Главный класс-оркестратор.
    Объединяет внешний извлекатель отношений, извлекатели подлежащего и дополнений
    и сборку троек. Один экземпляр можно использовать для любого числа предложений:
    между предложениями не хранится никакого состояния, кроме словаря падежей.
    """

    def __init__(self, relation_extractor: BaseRelationExtractor,
                 settings: Optional[ExtractorSettings] = None,
                 oracle: Optional[CaseOracle] = None):
        self.settings = settings or ExtractorSettings()

        if oracle is None and self.settings.case_filtering:
            oracle = load_case_oracle(self.settings.lexicon_path, self.settings.non_nominative_suffixes)
        self.oracle = oracle

        logger.info(f"Initializing DepConIE (case filtering: {self.oracle is not None})...")

        # Подлежащее: к фильтру по умолчанию добавляется выбор ближайшего в именительном
        self.subject_extractor = SubjectExtractor(
            strict=self.settings.strict_subjects,
            max_pp_size=self.settings.max_pp_size,
        )
        if self.oracle is not None:
            self.subject_extractor.add_mapper(ClosestNominativeArgumentMapper(self.oracle))

        self.object_extractor = ObjectExtractor(max_pp_size=self.settings.max_pp_size)

        self.extractor = BinaryExtractor(relation_extractor, self.subject_extractor, self.object_extractor)

    def extract(self, tree: DependencyParseTree) -> List[Triple]:
        """Тройки одного предложения."""
        return self.extractor.extract(tree)

    def extract_trees(self, trees: Iterable[DependencyParseTree]) -> List[Triple]:
        """Тройки для набора уже построенных деревьев, в порядке предложений."""
        triples = []
        for tree in tqdm(trees, desc="Extracting", disable=not self.settings.show_progress):
            triples.extend(self.extract(tree))
        return triples

    def extract_from_conllu(self, text: str) -> Dict[str, List[Triple]]:
        """
        Полный цикл для вывода ParZu в формате CoNLL.
        Возвращает словарь sent_id -> тройки. Некорректное предложение
        логируется и даёт пустой список, остальные обрабатываются дальше.
        """
        sentences = parse(text)
        logger.info(f"Extracting relations from {len(sentences)} sentences...")

        results: Dict[str, List[Triple]] = {}
        for i, sentence in enumerate(tqdm(sentences, desc="Extracting", disable=not self.settings.show_progress), 1):
            sent_id = sentence.metadata.get("sent_id", str(i))
            try:
                tree = from_token_list(sentence)
            except MalformedNodeError as e:
                logger.warning(f"Skipping sentence {sent_id}: {e}")
                results[sent_id] = []
                continue
            results[sent_id] = self.extract(tree)

        return results
