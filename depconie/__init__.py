"""
DepConIE: извлечение троек (подлежащее, отношение, дополнение) из деревьев зависимостей ParZu.
"""
from depconie.config import ExtractorSettings, load_config
from depconie.core.data_structures import Role, Span, Triple, TripleRecord
from depconie.core.errors import (
    AmbiguousSubjectError,
    DepConIEError,
    LexiconLoadError,
    MalformedNodeError,
    TokenNotFoundError,
)
from depconie.pipeline import DepConIE

__version__ = "0.1.0"

__all__ = [
    "AmbiguousSubjectError", "DepConIE", "DepConIEError", "ExtractorSettings", "LexiconLoadError",
    "MalformedNodeError", "Role", "Span", "TokenNotFoundError", "Triple", "TripleRecord", "load_config",
]
