"""Parsers for the engine's ``--format json`` output."""

from __future__ import annotations

import json
from typing import Any

from enginectl.errors import OutputParseError


def parse_json_documents(text: str) -> list[Any]:
    """Parse engine JSON output into a list of documents.

    Podman prints a single JSON array, docker prints one object per line.
    A lone object becomes a one-element list and blank output an empty one.
    """
    stripped = text.strip()
    if not stripped:
        return []

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError:
        return _parse_lines(stripped)

    if isinstance(data, list):
        return data
    return [data]


def first_document(text: str) -> Any:
    """Return the first document of an inspect result."""
    documents = parse_json_documents(text)
    if not documents:
        raise OutputParseError("Engine returned no documents")
    return documents[0]


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse output that must be exactly one JSON object (e.g. system info)."""
    document = first_document(text)
    if not isinstance(document, dict):
        raise OutputParseError(f"Expected a JSON object, got {type(document).__name__}")
    return document


def _parse_lines(text: str) -> list[Any]:
    documents: list[Any] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            documents.append(json.loads(line))
        except json.JSONDecodeError as err:
            raise OutputParseError(f"Failed to parse engine output: {line[:200]}") from err
    return documents
