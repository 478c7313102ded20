"""
Service layer for study sets.

``SetService`` creates, searches and deletes sets.  The store is
passed in by the caller (the API layer resolves it through a FastAPI
dependency), so the service keeps no state between calls.  All
validation happens when a ``SetRecord`` is built; validation and
store errors are left for the API layer to translate.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from smartwords_api.app.core.store import SetStore
from smartwords_api.app.records.sets import SetRecord, Word
from smartwords_api.app.schemas.set import SetCreate


logger = logging.getLogger(__name__)


class SetService:
    """Service class for managing study sets."""

    @classmethod
    async def create_set(cls, store: SetStore, data: SetCreate) -> SetRecord:
        """Validate and persist a new set.

        The set id, the id of every word and the creation timestamp are
        assigned here.  Nothing is written if validation fails.
        """
        record = SetRecord(
            id=store.new_id(),
            name=data.name,
            description=data.description,
            words=tuple(
                Word(id=store.new_id(), word=item.word, meaning=item.meaning)
                for item in data.words
            ),
            created_at=datetime.now(timezone.utc),
        )
        await store.insert(record.to_document())
        logger.info("Created set %s (%d words)", record.id, len(record.words))
        return record

    @classmethod
    async def search_sets(cls, store: SetStore, name: Optional[str] = None) -> List[SetRecord]:
        """Return sets whose name contains ``name``, or all sets when omitted."""
        sets = await SetRecord.find_all(store, name)
        logger.debug("Search %r matched %d sets", name, len(sets))
        return sets

    @classmethod
    async def delete_set(cls, store: SetStore, set_id: str) -> bool:
        """Delete a set by ID.

        Returns ``True`` if a set was deleted, ``False`` otherwise.
        """
        deleted = await store.delete(set_id)
        if deleted:
            logger.info("Deleted set %s", set_id)
        return deleted
