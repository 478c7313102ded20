"""
Validated in‑memory representation of a study set.

``SetRecord`` is the only way sets travel between the store and the
API.  Every instance is checked when it is built, whether the
attributes come from a client request or from a stored document, so
an invalid set can never be observed in memory.  Records are frozen
dataclasses and compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple

from smartwords_api.app.core.errors import ValidationError

if TYPE_CHECKING:
    from smartwords_api.app.core.store import SetStore


NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


@dataclass(frozen=True)
class Word:
    """A word/meaning pair embedded in a set."""

    id: str
    word: str
    meaning: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Word":
        return cls(id=doc["_id"], word=doc["word"], meaning=doc["meaning"])

    def to_document(self) -> Dict[str, Any]:
        return {"_id": self.id, "word": self.word, "meaning": self.meaning}


@dataclass(frozen=True)
class SetRecord:
    """A named, described collection of words.

    Construction raises ``ValidationError`` when

    * ``name`` is empty or longer than 100 characters,
    * ``description`` is empty or longer than 1000 characters,
    * ``words`` is empty.

    Rules are checked in that order and the first failure is raised.
    Attribute values are kept exactly as given; ``words`` is stored as
    a tuple so the record stays immutable.
    """

    id: str
    name: str
    description: str
    words: Tuple[Word, ...]
    created_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not 0 < len(self.name) <= NAME_MAX_LENGTH:
            raise ValidationError(
                f"Name must be between 1 and {NAME_MAX_LENGTH} characters long."
            )
        if (
            not isinstance(self.description, str)
            or not 0 < len(self.description) <= DESCRIPTION_MAX_LENGTH
        ):
            raise ValidationError(
                f"Description must be between 1 and {DESCRIPTION_MAX_LENGTH} characters long."
            )
        # Materialise first; a generator is truthy even when it yields nothing.
        try:
            words = tuple(self.words)
        except TypeError as exc:
            raise ValidationError("Words must be a sequence of word entries.") from exc
        if not words:
            raise ValidationError("A set must contain at least one word.")
        object.__setattr__(self, "words", words)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "SetRecord":
        """Build a record from a raw stored document.

        A document missing one of the expected fields is reported as a
        ``ValidationError`` like any other malformed input.
        """
        try:
            words = tuple(Word.from_document(w) for w in doc["words"])
            return cls(
                id=doc["_id"],
                name=doc["name"],
                description=doc["description"],
                words=words,
                created_at=doc["createdAt"],
            )
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed set document: {exc!r}") from exc

    def to_document(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "words": [word.to_document() for word in self.words],
            "createdAt": self.created_at,
        }

    @classmethod
    async def find_all(
        cls, store: "SetStore", name_filter: Optional[str] = None
    ) -> List["SetRecord"]:
        """Return every stored set, or those whose name contains ``name_filter``.

        Matching is delegated to ``store.find``.  The result is always a
        list; no match gives an empty list.  Store errors and invalid
        stored documents propagate to the caller.
        """
        documents = await store.find(name_filter=name_filter or None)
        return [cls.from_document(doc) for doc in documents]
