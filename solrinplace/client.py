"""Minimal HTTP client for the update handler of a collection."""

from __future__ import annotations

import posixpath
import urllib.error
import urllib.request
from collections.abc import Mapping, Sequence
from typing import IO, Union
from urllib.parse import urlencode

ParamValue = Union[str, Sequence[str]]


class SolrClient:
    """Talks to one collection on one host."""

    def __init__(self, host: str, collection: str) -> None:
        self.host = host
        self.collection = collection

    def url(self, component: str, params: Mapping[str, ParamValue]) -> str:
        """Build the URL of a handler with query parameters sorted by key."""
        parts = [p for p in ("solr", self.collection, component) if p]
        path = posixpath.normpath("/".join(parts))
        query = []
        for key in sorted(params):
            value = params[key]
            values = [value] if isinstance(value, str) else list(value)
            query.extend((key, v) for v in values)
        return f"http://{self.host}/{path}?{urlencode(query)}"

    def update(self, body: str) -> IO[bytes]:
        """POST a JSON update body with commit and return the response stream.

        The response is returned whatever its status, so the caller can read
        error bodies too.
        """
        url = self.url("update", {"commit": "true", "failOnVersionConflicts": "false"})
        request = urllib.request.Request(
            url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            return urllib.request.urlopen(request)
        except urllib.error.HTTPError as err:
            return err