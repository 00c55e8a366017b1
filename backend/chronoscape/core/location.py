"""
Location normalization.

Maps free-text place names ("Paris, France", "USA", "London") to the
short lowercase codes used in background asset names. The alias table
is data, not code: it lives in data/location_aliases.json and can be
swapped through Settings.alias_table_path.
"""
import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_ALIAS_TABLE_PATH = Path(__file__).parent.parent / "data" / "location_aliases.json"


class AliasTableError(ValueError):
    """Raised when an alias table file cannot be used."""


@dataclass(frozen=True)
class AliasTable:
    """
    Place name aliases and parent regions.

    `aliases` keeps file order; the substring fallback in `normalize`
    returns the first key that matches, so order is part of the contract.
    """
    aliases: Dict[str, str]
    parents: Dict[str, str] = field(default_factory=dict)

    def parent_of(self, code: str) -> Optional[str]:
        parent = self.parents.get(code)
        if parent and parent != code:
            return parent
        return None


def _string_map(raw, section: str, source: Path) -> Dict[str, str]:
    if not isinstance(raw, dict):
        raise AliasTableError(f"{source}: '{section}' must be an object")
    result: Dict[str, str] = {}
    for key, value in raw.items():
        # An empty key would match every place in the substring scan
        if not key.strip():
            raise AliasTableError(f"{source}: empty key in '{section}'")
        if not isinstance(value, str):
            raise AliasTableError(f"{source}: {section}[{key!r}] must be a string")
        result[key.strip().lower()] = value.strip().lower()
    return result


@lru_cache(maxsize=8)
def load_alias_table(path: Optional[Union[str, Path]] = None) -> AliasTable:
    """Load (and cache) an alias table from JSON."""
    source = Path(path) if path else DEFAULT_ALIAS_TABLE_PATH
    try:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise AliasTableError(f"Cannot read alias table {source}: {e}") from e
    except json.JSONDecodeError as e:
        raise AliasTableError(f"Invalid JSON in alias table {source}: {e}") from e

    if not isinstance(data, dict) or "aliases" not in data:
        raise AliasTableError(f"{source}: expected an object with an 'aliases' key")

    table = AliasTable(
        aliases=_string_map(data["aliases"], "aliases", source),
        parents=_string_map(data.get("parents", {}), "parents", source),
    )
    logger.debug(
        "Loaded alias table from %s (%d aliases, %d parents)",
        source, len(table.aliases), len(table.parents),
    )
    return table


def normalize(location: str, table: Optional[AliasTable] = None) -> str:
    """
    Normalize a place name to a location code.

    The country is usually the last comma-separated part ("City, Region,
    Country"), so only that part is considered:

    1. its last word, looked up in the alias table
    2. the whole part, looked up in the alias table
    3. the first alias key contained in the part
    4. otherwise the last word itself
    """
    if not location:
        return ""
    aliases = (table or load_alias_table()).aliases

    last_part = location.lower().split(",")[-1].strip()
    words = last_part.split()
    last_word = words[-1] if words else ""

    if last_word in aliases:
        return aliases[last_word]
    if last_part in aliases:
        return aliases[last_part]

    for key, code in aliases.items():
        if key in last_part:
            return code

    return last_word


def parent_region(code: str, table: Optional[AliasTable] = None) -> Optional[str]:
    """Region containing `code` ("california" -> "us"), if known."""
    if not code:
        return None
    return (table or load_alias_table()).parent_of(code)
