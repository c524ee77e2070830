from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RefactoringCandidate:
    """
    A source code entity that was deleted or inserted between two versions.

    Pairing and ranking never look inside a candidate; this type is a
    convenient default for callers that have nothing richer.
    """

    name: str
    entity_type: str  # method, field, class, ...
    signature: str = ""
    body: str = ""
    parent: str = ""  # enclosing class or module

    @property
    def qualified_name(self) -> str:
        return f"{self.parent}.{self.name}" if self.parent else self.name


def same_entity_type(deleted: Any, inserted: Any) -> bool:
    """
    True when both candidates report the same entity_type.
    Objects without an entity_type never rule a pair out.
    """
    deleted_type = getattr(deleted, "entity_type", None)
    inserted_type = getattr(inserted, "entity_type", None)
    if deleted_type is None or inserted_type is None:
        return True
    return deleted_type == inserted_type
