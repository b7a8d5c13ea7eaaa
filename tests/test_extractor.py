import unittest

from depconie.extraction.extractor import (
    MIN_SCORE,
    Extractor,
    FilterMapper,
    MaxMapper,
    ScoringMapper,
)


class NumberExtractor(Extractor):
    """Кандидаты - числа из строки."""

    def extract_candidates(self, source):
        return [int(x) for x in source.split()]


class LengthScore(ScoringMapper):
    def score(self, candidate):
        return len(candidate)


class FirstLetterMax(MaxMapper):
    def score(self, candidate):
        return 0 if candidate[0] == "x" else 1


class TestExtractorFramework(unittest.TestCase):
    def test_without_mappers(self):
        self.assertEqual(NumberExtractor().extract("3 1 2"), [3, 1, 2])

    def test_mappers_run_in_order(self):
        extractor = NumberExtractor()
        extractor.add_mapper(FilterMapper(lambda x: x % 2 == 1))
        # Обычная функция тоже годится в качестве маппера
        extractor.add_mapper(lambda xs: [x * 10 for x in xs])

        self.assertEqual(extractor.extract("1 2 3 4 5"), [10, 30, 50])

    def test_empty_candidates_are_not_an_error(self):
        calls = []
        extractor = NumberExtractor()
        extractor.add_mapper(FilterMapper(lambda x: False))
        extractor.add_mapper(lambda xs: calls.append(xs) or xs)

        self.assertEqual(extractor.extract("1 2"), [])
        self.assertEqual(extractor.extract(""), [])
        # После опустошения списка следующие мапперы не вызываются
        self.assertEqual(calls, [])

    def test_scoring_mapper_is_stable(self):
        result = LengthScore().map(["bb", "a", "cc", "ddd"])
        self.assertEqual(result, ["ddd", "bb", "cc", "a"])

    def test_max_mapper_first_wins_on_ties(self):
        self.assertEqual(FirstLetterMax().map(["xa", "ab", "ac"]), ["ab"])
        self.assertEqual(FirstLetterMax().map(["xa", "xb"]), ["xa"])
        self.assertEqual(FirstLetterMax().map([]), [])

    def test_min_score_is_below_any_distance(self):
        self.assertLess(MIN_SCORE, -10 ** 6)


if __name__ == '__main__':
    unittest.main()
