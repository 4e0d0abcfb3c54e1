# solrinplace

This tool reads documents from a CSV file and sends them to a Solr collection
as one JSON update request.

You can also give it the previous version of the data. It then compares each
document with its old state and does one of three things:

- **Skip it** when none of the allowed fields was added, removed or changed.
- **Send an in-place update** (`{"set": value}`) holding only the changed
  fields. This happens when every changed or added field is an in-place field
  and no field was removed.
- **Send the whole document** in every other case. Only the allowed fields
  are sent.

A document that has no old state is always sent whole.

## Installation

```
pip install .
```

The package depends only on the Python standard library (3.10 or later).

## Command line

```
solrinplace update --csv new.csv --old-csv old.csv \
    --host localhost:8983 --collection test \
    -a price,title -i price
```

Options of `update`:

| Option | Default | Meaning |
| --- | --- | --- |
| `--host` | `localhost:8983` | Solr host and port |
| `--collection` | `test` | Solr collection |
| `--csv` | `-` | CSV file with the new data (`-` reads standard input) |
| `--old-csv` | none | CSV file with the previous data |
| `-a`, `--allowed-fields` | none | fields to send; comma-separated, may be repeated |
| `-i`, `--inplace-fields` | none | fields that may be updated in place; comma-separated, may be repeated |

If `--allowed-fields` is not given, documents without an old state are sent
with every field. Documents that do have an old state are then never seen as
changed, so they are skipped.

### CSV files

- The first row of each file is the header.
- The header must contain an `id` column. The check on the column name
  ignores case. If several columns match, the last one is used.
- Every other column becomes a string field.
- Every row must have as many values as the header. Empty lines are ignored.

Every id in the old CSV must also appear in the new CSV. If a document is
missing from the new data, the tool reports an error.

### Output

The command prints these, in order:

1. The allowed and in-place field lists.
2. The request body.
3. Solr's response.

The body is posted to:

```
http://<host>/solr/<collection>/update?commit=true&failOnVersionConflicts=false
```

The response body is printed even when Solr answers with an HTTP error
status. Errors such as a missing file, a bad CSV file or an unreachable host
are printed to standard error, and the command exits with status 1.

## Library use

```python
from solrinplace.document import Document, Field
from solrinplace.builder import UpdateBatchBuilder

builder = UpdateBatchBuilder(["int1", "str1"], ["int1"])
builder.update(
    Document("1", [Field("int1", 20), Field("str1", "string")]),
    Document("1", [Field("int1", 10), Field("str1", "string")]),
)
print(builder.build())
# {"add":{"doc":{"id":"1","int1":{"set":20}}}}
```

`UpdateBatchBuilder` has these methods:

| Method | What it does |
| --- | --- |
| `add(*docs)` | queues new documents |
| `add_old(*docs)` | records the previous state of documents |
| `update(new_doc, old_doc)` | does both of the above for one document |
| `delete(*docs)` | queues deletion by id |
| `build()` | renders the body |
| `flush()` | clears everything that is queued |

Field values may be strings, integers or floats. Any other type raises
`solrinplace.encode.EncodeError`.

Other modules:

- **`solrinplace.encode`**: `json_encode` and `in_place_update_encode` render
  single documents.
- **`solrinplace.document`**: `DocSet` and `merge_doc_sets`.
- **`solrinplace.merge`**: the generic `merge` helper, which walks two sorted
  streams together.

To send a body yourself, use
`solrinplace.client.SolrClient(host, collection).update(body)`. It returns the
response stream.

## Limitations

- Everything is sent in one request, and it is committed at once.
- Requests use plain HTTP without authentication.
- Values are not escaped when the body is written. Ids, field names and
  values that contain quotes or backslashes give invalid JSON.
- Deletions are available only through `UpdateBatchBuilder.delete`. The
  command line sends only adds.