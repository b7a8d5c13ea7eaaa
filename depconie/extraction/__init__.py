from depconie.extraction.arguments import Argument, classify
from depconie.extraction.binary import BinaryExtractor
from depconie.extraction.extractor import (
    MIN_SCORE,
    Extractor,
    FilterMapper,
    Mapper,
    MaxMapper,
    ScoringMapper,
)
from depconie.extraction.mappers import (
    ClosestArgumentMapper,
    ClosestNominativeArgumentMapper,
    DummyAntecedentFilter,
    ValidArgumentFilter,
)
from depconie.extraction.objects import ObjectExtractor
from depconie.extraction.subject import SubjectExtractor

__all__ = [
    "Argument", "BinaryExtractor", "ClosestArgumentMapper", "ClosestNominativeArgumentMapper",
    "DummyAntecedentFilter", "Extractor", "FilterMapper", "MIN_SCORE", "Mapper", "MaxMapper",
    "ObjectExtractor", "ScoringMapper", "SubjectExtractor", "ValidArgumentFilter", "classify",
]
