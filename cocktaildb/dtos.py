"""
Response envelope DTOs (Pydantic v2).

The API answers with a single JSON object holding either a ``drinks`` or an
``ingredients`` collection. Drink and ingredient objects are passed through
as plain dicts; only the requested collection is checked, other keys are
never looked at.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import RootModel, TypeAdapter, ValidationError

EnvelopeKey = Literal["drinks", "ingredients"]
Record = Dict[str, Any]

_collection_adapter = TypeAdapter(Optional[List[Record]])


class Envelope(RootModel[Dict[str, Any]]):
    """Top-level JSON object of a response."""

    def collection(self, key: EnvelopeKey) -> Optional[List[Record]]:
        """Return the collection under ``key``.

        Missing, null, empty, or not a list of objects all map to None.
        """
        try:
            items = _collection_adapter.validate_python(self.root.get(key))
        except ValidationError:
            return None
        return items or None


def decode_envelope(body: str) -> Optional[Envelope]:
    """Parse a response body; malformed JSON or a non-object body gives None."""
    try:
        return Envelope.model_validate_json(body)
    except ValidationError:
        return None
