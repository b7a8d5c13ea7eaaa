from depconie.morphology.lexicon import (
    FallbackCaseOracle,
    MorphyLexicon,
    SuffixCaseOracle,
    load_case_oracle,
)

__all__ = ["FallbackCaseOracle", "MorphyLexicon", "SuffixCaseOracle", "load_case_oracle"]
