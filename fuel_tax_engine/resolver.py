"""
Jurisdiction inference from free-text location strings.

Locations come from user-entered trip logs and OCR'd fuel receipts, so
this is a heuristic rather than a geocoder:

1. The first standalone two-letter uppercase token, if it is a member code
   ("Denver, CO" -> CO).
2. Otherwise the first jurisdiction whose display name appears anywhere in
   the text, case-insensitively, in table order ("denver colorado" -> CO).
3. Otherwise UNKNOWN.

Display-name matching is order sensitive: "West Virginia" contains
"Virginia", and VA precedes WV in the table.
"""

from __future__ import annotations

import re
from typing import Optional

from fuel_tax_engine.jurisdictions import DEFAULT_TABLE, JurisdictionTable

UNKNOWN = "UNKNOWN"

_CODE_TOKEN = re.compile(r"\b([A-Z]{2})\b", re.ASCII)


class JurisdictionResolver:
    """Resolves location text to a jurisdiction code or UNKNOWN."""

    def __init__(self, table: Optional[JurisdictionTable] = None) -> None:
        self.table = table if table is not None else DEFAULT_TABLE

    def resolve(self, location_text: object) -> str:
        if not isinstance(location_text, str) or not location_text:
            return UNKNOWN

        match = _CODE_TOKEN.search(location_text)
        if match and match.group(1) in self.table:
            return match.group(1)

        lowered = location_text.lower()
        for info in self.table:
            if info.name.lower() in lowered:
                return info.code

        return UNKNOWN


_DEFAULT_RESOLVER = JurisdictionResolver()


def resolve_jurisdiction(location_text: object) -> str:
    """Resolve location text against the default reference table."""
    return _DEFAULT_RESOLVER.resolve(location_text)
