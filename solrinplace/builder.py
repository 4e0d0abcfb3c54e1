"""Batching of add and delete commands into one update request body."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from solrinplace.document import (
    DocSet,
    Document,
    Field,
    field_compare,
    iter_fields,
    merge_doc_sets,
)
from solrinplace.encode import in_place_update_encode, json_encode
from solrinplace.merge import Merged, merge


def _same_value(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


class UpdateBatchBuilder:
    """Collects new, old and deleted documents and renders an update body.

    ``fields`` limits which fields are written for full adds; ``None`` means
    every field.  ``in_place_update_fields`` names the fields that may be
    changed with an atomic ``set`` instead of re-adding the document.
    """

    def __init__(
        self,
        fields: Optional[Sequence[str]],
        in_place_update_fields: Optional[Sequence[str]],
    ) -> None:
        self._fields = list(fields) if fields is not None else None
        self._in_place_fields = (
            list(in_place_update_fields) if in_place_update_fields is not None else None
        )
        self.old_documents = DocSet()
        self.documents = DocSet()
        self.delete_documents = DocSet()

    def add(self, *args: Document) -> None:
        """Queue new documents."""
        for doc in args:
            self.documents.add(doc)

    def add_old(self, *args: Document) -> None:
        """Record the previous state of documents, used to find changes."""
        for doc in args:
            self.old_documents.add(doc)

    def update(self, new_doc: Document, old_doc: Document) -> None:
        """Queue a new document together with its previous state."""
        self.old_documents.add(old_doc)
        self.documents.add(new_doc)

    def delete(self, *args: Document) -> None:
        """Queue documents for deletion by id."""
        for doc in args:
            self.delete_documents.add(doc)

    def build(self) -> str:
        """Render the queued commands as a JSON update body."""
        commands: list[str] = []
        for merged in merge_doc_sets(self.old_documents, self.documents):
            if not self._has_updates(merged.left, merged.right):
                continue
            commands.append(f'"add":{{"doc":{self._encode_doc(merged)}}}')

        if len(self.delete_documents) > 0:
            ids = ",".join(f'"{doc.id}"' for doc in self.delete_documents)
            commands.append(f'"delete":[{ids}]')

        return "{" + ",".join(commands) + "}"

    def flush(self) -> None:
        """Forget every queued document."""
        self.old_documents = DocSet()
        self.documents = DocSet()
        self.delete_documents = DocSet()

    def _encode_doc(self, merged: Merged[Document]) -> str:
        old, new = merged.left, merged.right
        if new is None:
            raise ValueError(f"document {old.id!r} has an old state but no new one")
        if old is None or not self._can_in_place_update(old, new):
            return json_encode(new, self._fields)

        changed: list[Field] = []
        for pair in merge(iter_fields(old.fields), iter_fields(new.fields), field_compare):
            if pair.right is None:
                continue
            if pair.left is not None and _same_value(pair.left.value, pair.right.value):
                continue
            changed.append(pair.right)
        return in_place_update_encode(Document(id=old.id, fields=changed), self._in_place_fields)

    def _has_updates(self, old: Optional[Document], new: Optional[Document]) -> bool:
        if old is None or new is None:
            return True
        allowed = self._fields or ()
        for pair in merge(iter_fields(old.fields), iter_fields(new.fields), field_compare):
            left, right = pair.left, pair.right
            if left is not None and right is not None:
                if not _same_value(left.value, right.value) and left.key in allowed:
                    return True
            elif right is not None:
                if right.key in allowed:
                    return True
            elif left is not None and left.key in allowed:
                return True
        return False

    def _can_in_place_update(self, old: Document, new: Document) -> bool:
        in_place = self._in_place_fields or ()
        for pair in merge(iter_fields(old.fields), iter_fields(new.fields), field_compare):
            left, right = pair.left, pair.right
            if left is not None and right is not None:
                if not _same_value(left.value, right.value) and left.key not in in_place:
                    return False
            elif right is not None:
                if right.key not in in_place:
                    return False
            else:
                return False
        return True