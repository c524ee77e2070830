__version__ = "0.1.0"

from .pairing import (
    RefactoringPair,
    create_pair,
    compare_similarity,
    compare_pairs,
    descending_similarity,
    sort_pairs,
)
from .ranking import PairingQueue
from .candidate import RefactoringCandidate, same_entity_type
from .config import MatchingConfig, ConfigurationError, load_env
from .extractor import RefactoringExtractor, ExtractionResult

__all__ = [
    "RefactoringPair",
    "create_pair",
    "compare_similarity",
    "compare_pairs",
    "descending_similarity",
    "sort_pairs",
    "PairingQueue",
    "RefactoringCandidate",
    "same_entity_type",
    "MatchingConfig",
    "ConfigurationError",
    "load_env",
    "RefactoringExtractor",
    "ExtractionResult",
]
