"""Documents, their fields, and sets of documents keyed by id."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from solrinplace.merge import Merged, merge


@dataclass(frozen=True)
class Field:
    """A single named value of a document."""

    key: str
    value: Any


@dataclass
class Document:
    """A document with an id and a list of fields."""

    id: str
    fields: list[Field] = field(default_factory=list)


def iter_fields(fields: list[Field]) -> Iterator[Field]:
    """Sort ``fields`` in place by key and iterate over them."""
    fields.sort(key=lambda f: f.key)
    return iter(fields)


def _compare(a: str, b: str) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def field_compare(f1: Field, f2: Field) -> int:
    """Order two fields by key."""
    return _compare(f1.key, f2.key)


def document_compare(d1: Document, d2: Document) -> int:
    """Order two documents by id."""
    return _compare(d1.id, d2.id)


class DocSet:
    """Documents keyed by id; a later document replaces one with the same id."""

    def __init__(self, docs: Iterable[Document] = ()) -> None:
        self._docs: dict[str, Document] = {}
        for doc in docs:
            self.add(doc)

    def add(self, doc: Document) -> None:
        self._docs[doc.id] = doc

    def __iter__(self) -> Iterator[Document]:
        for key in sorted(self._docs):
            yield self._docs[key]

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def __repr__(self) -> str:
        return f"DocSet({list(self)!r})"


def merge_doc_sets(
    left: Iterable[Document], right: Iterable[Document]
) -> Iterator[Merged[Document]]:
    """Merge two id-sorted document streams, pairing documents with equal ids."""
    return merge(left, right, document_compare)