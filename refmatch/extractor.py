"""
Greedy refactoring extraction.

Responsibilities:
- Score every compatible deleted x inserted combination.
- Queue the pairs that reach the similarity threshold.
- Commit pairs from most to least similar, each candidate at most once.

Non-Responsibilities:
- No similarity computation (the caller supplies the metric).
- No globally optimal assignment.

Invariant:
Given identical inputs, extraction returns the same matches in the same order.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, Set

from .candidate import same_entity_type
from .config import MatchingConfig
from .logger import StructuredLogger, get_logger
from .pairing import C, RefactoringPair, create_pair
from .ranking import PairingQueue

SimilarityFunction = Callable[[Any, Any], float]
CompatibilityCheck = Callable[[Any, Any], bool]


@dataclass
class ExtractionResult(Generic[C]):
    """Committed pairs in commit order plus the candidates left over."""

    matches: List[RefactoringPair[C]] = field(default_factory=list)
    unmatched_deleted: List[C] = field(default_factory=list)
    unmatched_inserted: List[C] = field(default_factory=list)


class RefactoringExtractor:
    """
    Pairs deleted with inserted candidates by repeatedly taking the most
    similar pair whose candidates are both still free.
    """

    def __init__(
        self,
        similarity: SimilarityFunction,
        config: Optional[MatchingConfig] = None,
        compatible: Optional[CompatibilityCheck] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            similarity: Metric called as similarity(deleted, inserted)
            config: Threshold and logging settings (default: MatchingConfig())
            compatible: Filter applied before scoring (default: same_entity_type)
            logger: Logger to report to (default: the global logger)

        Without an explicit logger the extractor shares the global one.
        The config's log_level and log_dir only apply if that global
        logger does not exist yet, and metrics from every extractor
        sharing it add up. Pass a StructuredLogger for separate metrics.
        """
        self.similarity = similarity
        self.config = config if config is not None else MatchingConfig()
        self.compatible = compatible if compatible is not None else same_entity_type
        if logger is None:
            logger = get_logger(
                level=self.config.log_level,
                log_dir=self.config.log_dir,
                enable_file=self.config.log_dir is not None,
            )
        self.logger = logger

    def candidate_pairs(self, deleted: Sequence[C], inserted: Sequence[C]) -> PairingQueue:
        """
        Score all compatible combinations and queue those at or above the
        threshold. A NaN score never reaches the threshold.
        """
        threshold = self.config.similarity_threshold
        queue = PairingQueue()

        for deleted_entity in deleted:
            for inserted_entity in inserted:
                if not self._is_compatible(deleted_entity, inserted_entity):
                    self.logger.record_incompatible()
                    continue

                score = self._score(deleted_entity, inserted_entity)
                self.logger.record_scored()
                if not score >= threshold:
                    self.logger.record_below_threshold()
                    continue

                queue.push(create_pair(deleted_entity, inserted_entity, score))
                self.logger.record_queued()

        self.logger.debug(
            "Candidate pairs queued",
            deleted=len(deleted),
            inserted=len(inserted),
            queued=len(queue),
            threshold=threshold,
        )
        return queue

    def extract(self, deleted: Sequence[C], inserted: Sequence[C]) -> ExtractionResult[C]:
        """
        Greedily commit refactoring pairs.

        Args:
            deleted: Candidates removed from the old version
            inserted: Candidates added in the new version

        Returns:
            ExtractionResult with matches in non-increasing similarity
        """
        queue = self.candidate_pairs(deleted, inserted)
        result: ExtractionResult[C] = ExtractionResult()

        # Identity, not equality: candidates may be unhashable or compare equal
        taken_deleted: Set[int] = set()
        taken_inserted: Set[int] = set()

        for pair in queue.drain():
            deleted_id = id(pair.deleted_entity)
            inserted_id = id(pair.inserted_entity)
            if deleted_id in taken_deleted or inserted_id in taken_inserted:
                self.logger.record_conflict()
                continue

            taken_deleted.add(deleted_id)
            taken_inserted.add(inserted_id)
            result.matches.append(pair)
            self.logger.record_commit()
            self.logger.debug(
                "Committed refactoring pair",
                deleted=repr(pair.deleted_entity),
                inserted=repr(pair.inserted_entity),
                similarity=pair.similarity,
            )

        result.unmatched_deleted = [d for d in deleted if id(d) not in taken_deleted]
        result.unmatched_inserted = [i for i in inserted if id(i) not in taken_inserted]

        self.logger.info(
            f"Extraction complete: {len(result.matches)} refactorings",
            unmatched_deleted=len(result.unmatched_deleted),
            unmatched_inserted=len(result.unmatched_inserted),
        )
        return result

    def _is_compatible(self, deleted_entity: Any, inserted_entity: Any) -> bool:
        try:
            return self.compatible(deleted_entity, inserted_entity)
        except Exception as e:
            self.logger.error(f"Compatibility check failed: {e}", error_type=type(e).__name__)
            raise

    def _score(self, deleted_entity: Any, inserted_entity: Any) -> float:
        try:
            return self.similarity(deleted_entity, inserted_entity)
        except Exception as e:
            self.logger.error(f"Similarity computation failed: {e}", error_type=type(e).__name__)
            raise
