import pytest

from solrinplace.document import (
    DocSet,
    Document,
    Field,
    document_compare,
    field_compare,
    iter_fields,
    merge_doc_sets,
)
from solrinplace.merge import Merged


@pytest.mark.parametrize(
    "fields, expected",
    [
        ([], []),
        (
            [Field("a", 1), Field("b", 1), Field("c", 1)],
            [Field("a", 1), Field("b", 1), Field("c", 1)],
        ),
        (
            [Field("a", 1), Field("c", 1), Field("b", 1)],
            [Field("a", 1), Field("b", 1), Field("c", 1)],
        ),
    ],
    ids=["empty", "sorted", "not sorted"],
)
def test_iter_fields(fields, expected):
    assert list(iter_fields(fields)) == expected


def test_iter_fields_sorts_in_place():
    fields = [Field("z", 1), Field("m", 2), Field("a", 3)]
    iter_fields(fields)
    assert [f.key for f in fields] == ["a", "m", "z"]


def test_field_compare():
    assert field_compare(Field("a", 1), Field("a", 2)) == 0
    assert field_compare(Field("a", 1), Field("b", 1)) == -1
    assert field_compare(Field("b", 1), Field("a", 1)) == 1


def test_document_compare():
    assert document_compare(Document("1"), Document("1")) == 0
    assert document_compare(Document("1"), Document("2")) == -1
    assert document_compare(Document("2"), Document("1")) == 1


def test_docset_replaces_same_id_and_iterates_sorted():
    ds = DocSet()
    ds.add(Document("2", [Field("x", 1)]))
    ds.add(Document("1"))
    ds.add(Document("2", [Field("x", 2)]))
    assert len(ds) == 2
    assert "2" in ds
    assert list(ds) == [Document("1"), Document("2", [Field("x", 2)])]


def gen_doc(doc_id, val1, val2):
    return Document(doc_id, [Field("int1", val1), Field("str1", val2)])


@pytest.mark.parametrize(
    "ds1, ds2, expected",
    [
        (DocSet(), DocSet(), []),
        (
            DocSet([gen_doc("2", 2, "string"), gen_doc("1", 1, "string")]),
            DocSet(),
            [
                Merged(left=gen_doc("1", 1, "string")),
                Merged(left=gen_doc("2", 2, "string")),
            ],
        ),
        (
            DocSet(),
            DocSet([gen_doc("2", 2, "string"), gen_doc("1", 1, "string")]),
            [
                Merged(right=gen_doc("1", 1, "string")),
                Merged(right=gen_doc("2", 2, "string")),
            ],
        ),
        (
            DocSet(
                [
                    gen_doc("9", 9, "str9 ds1"),
                    gen_doc("1", 1, "str1 ds1"),
                    gen_doc("4", 4, "str4 ds1"),
                    gen_doc("6", 6, "str6 ds1"),
                    gen_doc("7", 7, "str7 ds1"),
                ]
            ),
            DocSet(
                [
                    gen_doc("1", 10, "str1 ds2"),
                    gen_doc("2", 20, "str2 ds2"),
                    gen_doc("3", 30, "str3 ds2"),
                    gen_doc("5", 50, "str5 ds2"),
                    gen_doc("8", 80, "str8 ds2"),
                ]
            ),
            [
                Merged(left=gen_doc("1", 1, "str1 ds1"), right=gen_doc("1", 10, "str1 ds2")),
                Merged(right=gen_doc("2", 20, "str2 ds2")),
                Merged(right=gen_doc("3", 30, "str3 ds2")),
                Merged(left=gen_doc("4", 4, "str4 ds1")),
                Merged(right=gen_doc("5", 50, "str5 ds2")),
                Merged(left=gen_doc("6", 6, "str6 ds1")),
                Merged(left=gen_doc("7", 7, "str7 ds1")),
                Merged(right=gen_doc("8", 80, "str8 ds2")),
                Merged(left=gen_doc("9", 9, "str9 ds1")),
            ],
        ),
    ],
    ids=["empty", "only ds1", "only ds2", "both"],
)
def test_merge_doc_sets(ds1, ds2, expected):
    assert list(merge_doc_sets(ds1, ds2)) == expected