"""
Surf Spots Backend - Record Repository
========================================

What:  Pure in-memory list operations over one loaded SpotCollection.
How:   Linear scans over `collection.records`; the first record whose id
       matches wins. Mutations change the collection in place.
Who:   Used by SpotService between load() and save().

Matching Rules:
    - An empty lookup id never matches, even a record stored with id "".
    - Duplicate ids are tolerated; only the first occurrence is visible to
      find/update/remove.
"""

from typing import Optional

from surfspots.schemas.spot import SpotCollection, SpotRecord, SpotUpdate


class SpotRepository:
    """List operations over a single collection; no I/O."""

    def __init__(self, collection: SpotCollection):
        self.collection = collection

    def _index_of(self, spot_id: str) -> int:
        if not spot_id:
            return -1
        for i, record in enumerate(self.collection.records):
            if record.id == spot_id:
                return i
        return -1

    def find_by_id(self, spot_id: str) -> Optional[SpotRecord]:
        index = self._index_of(spot_id)
        if index == -1:
            return None
        return self.collection.records[index]

    def append(self, record: SpotRecord) -> None:
        """Add `record` at the end. Ids are not checked for uniqueness."""
        self.collection.records.append(record)

    def update_fields(self, spot_id: str, update: SpotUpdate) -> bool:
        """
        Overwrite the provided fields of the first record with `spot_id`.

        Lists are applied whenever they are not null, so `[]` clears the
        field. Address is applied only when non-empty. Every other field is
        left as it was.

        Returns:
            True if a record matched.
        """
        record = self.find_by_id(spot_id)
        if record is None:
            return False

        fields = record.fields
        if update.surf_break is not None:
            fields.surf_break = list(update.surf_break)
        if update.photos is not None:
            fields.photos = [photo.model_copy(deep=True) for photo in update.photos]
        if update.address:
            fields.address = update.address
        return True

    def remove_by_id(self, spot_id: str) -> bool:
        """Remove the first record with `spot_id`, keeping the order of the rest."""
        index = self._index_of(spot_id)
        if index == -1:
            return False
        del self.collection.records[index]
        return True

    def __len__(self) -> int:
        return len(self.collection.records)
