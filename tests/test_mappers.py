import os
import tempfile
import unittest

from depconie.core.data_structures import Role, Span
from depconie.core.errors import LexiconLoadError, TokenNotFoundError
from depconie.extraction.arguments import Argument
from depconie.extraction.extractor import MIN_SCORE
from depconie.extraction.mappers import (
    ClosestArgumentMapper,
    ClosestNominativeArgumentMapper,
)
from depconie.extraction.subject import SubjectExtractor
from depconie.morphology.lexicon import (
    FallbackCaseOracle,
    MorphyLexicon,
    SuffixCaseOracle,
    load_case_oracle,
)

from helpers import CASE_AMBIGUITY, make_tree

LEXICON_LINES = [
    "# form\tlemma\tanalysis",
    "Hund\tHund\tSUB AKK SIN MAS",
    "Hund\tHund\tSUB DAT SIN MAS",
    "Mann\tMann\tSUB NOM SIN MAS",
    "Frau\tFrau\tSUB NOM SIN FEM",
    "Frau\tFrau\tSUB AKK SIN FEM",
]


def oracle(lines=LEXICON_LINES, suffixes=()):
    return FallbackCaseOracle(MorphyLexicon.from_lines(lines), SuffixCaseOracle(suffixes))


class TestMorphyLexicon(unittest.TestCase):
    def setUp(self):
        self.lexicon = MorphyLexicon.from_lines(LEXICON_LINES)

    def test_cases_accumulate(self):
        self.assertEqual(self.lexicon.cases("Hund"), frozenset({"AKK", "DAT"}))
        self.assertEqual(len(self.lexicon), 3)
        self.assertIn("Frau", self.lexicon)

    def test_is_nominative(self):
        self.assertTrue(self.lexicon.is_nominative("Mann"))
        self.assertTrue(self.lexicon.is_nominative("Frau"))
        self.assertFalse(self.lexicon.is_nominative("Hund"))

    def test_unknown_token(self):
        with self.assertRaises(TokenNotFoundError):
            self.lexicon.is_nominative("Katze")

    def test_bad_line(self):
        with self.assertRaises(LexiconLoadError):
            MorphyLexicon.from_lines(["Hund SUB AKK"])

    def test_fallback(self):
        combined = oracle(suffixes=["en"])
        self.assertFalse(combined.is_nominative("Hund"))
        # Нет в словаре - решает суффиксная эвристика
        self.assertTrue(combined.is_nominative("Katze"))
        self.assertFalse(combined.is_nominative("Studenten"))

    def test_suffix_oracle_is_total(self):
        self.assertTrue(SuffixCaseOracle().is_nominative("irgendwas"))
        self.assertTrue(SuffixCaseOracle(["en"]).is_nominative(""))


class TestLoadCaseOracle(unittest.TestCase):
    def test_missing_lexicon_disables_filtering(self):
        with self.assertLogs("depconie.morphology.lexicon", level="ERROR"):
            result = load_case_oracle("/nonexistent/morphy-export.tsv")
        self.assertIsNone(result)

    def test_no_path(self):
        self.assertIsNone(load_case_oracle(None))

    def test_load_once(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "morphy.tsv")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("\n".join(LEXICON_LINES) + "\n")

            first = load_case_oracle(path)
            second = load_case_oracle(path)

        self.assertIsNotNone(first)
        self.assertIs(first, second)
        self.assertTrue(first.is_nominative("Mann"))


class TestClosestNominativeMapper(unittest.TestCase):
    def setUp(self):
        # Den Hund (дистанция 1) ... der Mann (дистанция 5)
        self.tree = make_tree(CASE_AMBIGUITY)
        self.relation = Span(self.tree, {3})
        self.dog = Argument(self.tree[2], self.relation, Role.SUBJECT)
        self.man = Argument(self.tree[8], self.relation, Role.SUBJECT)

    def test_nominative_beats_closer_candidate(self):
        mapper = ClosestNominativeArgumentMapper(oracle())

        self.assertEqual(mapper.score(self.dog), MIN_SCORE)
        self.assertEqual(mapper.score(self.man), -5)
        self.assertEqual(mapper.map([self.dog, self.man]), [self.man])

    def test_closer_wins_among_nominatives(self):
        lines = ["Hund\tHund\tSUB NOM SIN MAS", "Mann\tMann\tSUB NOM SIN MAS"]
        mapper = ClosestNominativeArgumentMapper(oracle(lines))
        self.assertEqual(mapper.map([self.man, self.dog]), [self.dog])

    def test_without_oracle_only_distance_counts(self):
        mapper = ClosestNominativeArgumentMapper(None)
        self.assertEqual(mapper.map([self.man, self.dog]), [self.dog])
        self.assertEqual(ClosestArgumentMapper().map([self.man, self.dog]), [self.dog])

    def test_non_nominatives_tie(self):
        mapper = ClosestNominativeArgumentMapper(oracle(["Mann\tMann\tSUB AKK SIN MAS"], suffixes=["hund"]))
        # Оба кандидата получают MIN_SCORE - побеждает первый по порядку
        self.assertEqual(mapper.map([self.man, self.dog]), [self.man])

    def test_in_subject_extractor(self):
        extractor = SubjectExtractor()
        extractor.add_mapper(ClosestNominativeArgumentMapper(oracle()))

        spans = extractor.extract(self.relation)
        self.assertEqual([s.text for s in spans], ["der Mann"])


if __name__ == '__main__':
    unittest.main()
