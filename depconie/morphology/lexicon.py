# depconie/morphology/lexicon.py
"""
Оракулы падежа для немецких существительных.

Основной оракул - словарь в формате выгрузки Morphy (форма, лемма, анализ),
запасной - суффиксная эвристика, которая отвечает всегда.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Tuple

from depconie.core.errors import LexiconLoadError, TokenNotFoundError
from depconie.core.interfaces import CaseOracle

logger = logging.getLogger(__name__)

NOMINATIVE = "NOM"
CASES = {"NOM", "GEN", "DAT", "AKK"}


class MorphyLexicon(CaseOracle):
    """
    Словарь форма -> множество падежей.
    Только для чтения: после загрузки безопасно разделяется между потоками.
    """

    def __init__(self, entries: Dict[str, Set[str]]):
        self._cases = {form: frozenset(cases) for form, cases in entries.items()}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MorphyLexicon":
        """
        Строки вида 'Tag<TAB>Tag<TAB>SUB NOM SIN MAS'.
        Одна форма может встречаться в нескольких строках - падежи объединяются.
        """
        entries: Dict[str, Set[str]] = {}
        for line_no, line in enumerate(lines, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split("\t")
            if len(parts) < 3:
                raise LexiconLoadError(f"Line {line_no}: expected 3 tab-separated columns, got {len(parts)}")

            form, analysis = parts[0], parts[2]
            cases = {tag for tag in analysis.replace(":", " ").split() if tag in CASES}
            entries.setdefault(form, set()).update(cases)
        return cls(entries)

    @classmethod
    def load(cls, path: Path) -> "MorphyLexicon":
        path = Path(path)
        if not path.exists():
            raise LexiconLoadError(f"Lexicon file {path} not found")

        logger.info(f"Loading Morphy lexicon from {path}...")
        with open(path, 'r', encoding='utf-8') as f:
            lexicon = cls.from_lines(f)
        logger.info(f"Morphy lexicon loaded: {len(lexicon)} forms")
        return lexicon

    def cases(self, token: str) -> frozenset:
        try:
            return self._cases[token]
        except KeyError:
            raise TokenNotFoundError(token) from None

    def is_nominative(self, token: str) -> bool:
        return NOMINATIVE in self.cases(token)

    def __contains__(self, token: str) -> bool:
        return token in self._cases

    def __len__(self):
        return len(self._cases)


class SuffixCaseOracle(CaseOracle):
    """
    Запасной оракул. Никогда не бросает исключений:
    форма считается неименительной, только если оканчивается на один из заданных суффиксов.
    """

    def __init__(self, non_nominative_suffixes: Iterable[str] = ()):
        self.suffixes = tuple(s.lower() for s in non_nominative_suffixes if s)

    def is_nominative(self, token: str) -> bool:
        if not self.suffixes:
            return True
        return not token.lower().endswith(self.suffixes)


class FallbackCaseOracle(CaseOracle):
    """Спрашивает основной оракул, а если формы в нём нет - запасной."""

    def __init__(self, primary: CaseOracle, fallback: CaseOracle):
        self.primary = primary
        self.fallback = fallback

    def is_nominative(self, token: str) -> bool:
        try:
            return self.primary.is_nominative(token)
        except TokenNotFoundError:
            # Отсутствие формы в словаре - штатная ситуация
            return self.fallback.is_nominative(token)


@lru_cache(maxsize=None)
def _load_cached(path: str, suffixes: Tuple[str, ...]) -> Optional[CaseOracle]:
    try:
        lexicon = MorphyLexicon.load(Path(path))
    except (LexiconLoadError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not load Morphy lexicon: {e}. Case filtering is disabled.")
        return None
    return FallbackCaseOracle(lexicon, SuffixCaseOracle(suffixes))


def load_case_oracle(lexicon_path: Optional[Path],
                     non_nominative_suffixes: Iterable[str] = ()) -> Optional[CaseOracle]:
    """
    Оракул падежа на весь процесс: словарь грузится один раз на путь и дальше только читается.
    None означает, что фильтрация по падежу отключена.
    """
    if lexicon_path is None:
        logger.info("No lexicon configured, case filtering is disabled.")
        return None
    return _load_cached(str(Path(lexicon_path).resolve()), tuple(non_nominative_suffixes))
