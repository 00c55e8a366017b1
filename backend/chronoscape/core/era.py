"""
Era classification for free-text historical dates.

Dates arrive as loosely formatted strings ("1791", "March 1947",
"800 BCE") and are bucketed into the granularity the background
library is organised by: ancient, antiquity, or a numbered century.
"""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


BCE_MARKERS = ("bc", "bce", "b.c", "b.c.e")

# Used when no year can be read from the date
DEFAULT_CENTURY = 19

_FIRST_NUMBER = re.compile(r"\b(\d+)\b", re.ASCII)
_YEAR_NUMBER = re.compile(r"\b(\d{3,4})\b", re.ASCII)


class EraKind(str, Enum):
    ANCIENT = "ancient"      # 1000+ BCE
    ANTIQUITY = "antiquity"  # 0-999 BCE
    CENTURY = "century"


@dataclass(frozen=True)
class EraBucket:
    """Classified era. `century` is only set for CENTURY buckets."""
    kind: EraKind
    century: Optional[int] = None

    @classmethod
    def ancient(cls) -> "EraBucket":
        return cls(EraKind.ANCIENT)

    @classmethod
    def antiquity(cls) -> "EraBucket":
        return cls(EraKind.ANTIQUITY)

    @classmethod
    def of_century(cls, century: int) -> "EraBucket":
        return cls(EraKind.CENTURY, century)

    @property
    def is_pre_classical(self) -> bool:
        return self.kind is not EraKind.CENTURY

    @property
    def token(self) -> str:
        """Prefix used in asset identifiers ("ancient", "antiquity", "19")."""
        if self.kind is EraKind.CENTURY:
            return str(self.century)
        return self.kind.value

    def __str__(self) -> str:
        return self.token


def is_bce(date: str) -> bool:
    lowered = (date or "").lower()
    return any(marker in lowered for marker in BCE_MARKERS)


def classify(date: str) -> EraBucket:
    """
    Classify a date string into an era bucket.

    BCE dates split at 1000 BCE into ancient and antiquity. CE dates map
    to ceil(year / 100), reading only 3-4 digit numbers so incidental
    small numbers ("page 12") are not taken for years. Anything without
    a readable year falls back to the 19th century.
    """
    date = date or ""

    first = _FIRST_NUMBER.search(date)
    if first is None:
        return EraBucket.of_century(DEFAULT_CENTURY)

    if is_bce(date):
        year = int(first.group(1))
        if year >= 1000:
            return EraBucket.ancient()
        return EraBucket.antiquity()

    ce_year = _YEAR_NUMBER.search(date)
    if ce_year:
        return EraBucket.of_century(math.ceil(int(ce_year.group(1)) / 100))

    return EraBucket.of_century(DEFAULT_CENTURY)


def extract_decade(date: str) -> Optional[str]:
    """
    First three digits of the CE year ("194" for 1947), or None.

    Reads the same year `classify` reads, so a date whose year has only
    three digits has no decade.
    """
    if not date or is_bce(date):
        return None
    match = _YEAR_NUMBER.search(date)
    if match is None or len(match.group(1)) != 4:
        return None
    return match.group(1)[:3]
