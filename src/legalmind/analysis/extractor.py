"""
Pattern extraction of dates, amounts and party names from document text.

Pure regex matching over free text; there is no parsing of document
structure. Results come back in order of first appearance. A text with no
matches yields an empty list, never an error.
"""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from legalmind.config.constants import (
    DEFAULT_CURRENCY,
    ENTITY_SUFFIXES,
    LICENSEE_ROLE,
    LICENSOR_ROLE,
    MONTH_NAMES,
)


class FieldKind(Enum):
    """Kinds of extracted field."""

    DATE = "date"
    AMOUNT = "amount"
    PARTY_NAME = "party_name"


@dataclass(frozen=True)
class ExtractedField:
    """A structured value pulled from text."""

    kind: FieldKind
    raw_match: str  # Text exactly as matched
    normalized: Optional[str] = None  # Canonical form, when one exists
    position: int = 0  # Character offset of the match in the source text
    currency: Optional[str] = None  # Amounts only
    role: Optional[str] = None  # Party names only

    @property
    def attributes(self) -> Dict[str, str]:
        """Kind-specific extras: currency for amounts, role for parties."""
        extras = {"currency": self.currency, "role": self.role}
        return {k: v for k, v in extras.items() if v is not None}

    def to_dict(self) -> dict:
        data = {
            "kind": self.kind.value,
            "raw_match": self.raw_match,
            "normalized": self.normalized,
            "position": self.position,
        }
        data.update(self.attributes)
        return data

    def __repr__(self) -> str:
        return f"ExtractedField({self.kind.value}, {self.raw_match!r})"


_MONTHS = "|".join(MONTH_NAMES)
_SUFFIX = "(?:" + "|".join(
    re.escape(s) if s.endswith(".") else re.escape(s) + r"\b" for s in ENTITY_SUFFIXES
) + ")"

DATE_PATTERN = re.compile(
    r"\b(?:"
    rf"(?P<month_name>{_MONTHS})\s+(?P<day>\d{{1,2}}),?\s+(?P<year>\d{{4}})"
    r"|(?P<us_month>\d{1,2})/(?P<us_day>\d{1,2})/(?P<us_year>\d{4})"
    r"|(?P<iso_year>\d{4})-(?P<iso_month>\d{2})-(?P<iso_day>\d{2})"
    r")\b"
)

# Digits and commas taken as one token so a malformed group is never shortened.
AMOUNT_PATTERN = re.compile(r"\$[\d,]*\d(?:\.\d{2})?")

# One or two capitalized words (CamelCase allowed) followed by an entity suffix.
PARTY_PATTERN = re.compile(rf"\b[A-Z][A-Za-z]+(?: [A-Z][A-Za-z]+)? {_SUFFIX}")

# A quoted name that starts with a capital and ends with an entity suffix.
QUOTED_PARTY_PATTERN = re.compile(rf"[\"“](?P<name>[A-Z][^\"“”\n]*?{_SUFFIX})[\"”]")


def _normalize_date(m: "re.Match") -> Optional[str]:
    """ISO form of a matched date, or None if it is not a real calendar date."""
    try:
        if m.group("month_name"):
            month = MONTH_NAMES.index(m.group("month_name")) + 1
            parsed = date(int(m.group("year")), month, int(m.group("day")))
        elif m.group("us_month"):
            parsed = date(int(m.group("us_year")), int(m.group("us_month")), int(m.group("us_day")))
        else:
            parsed = date(int(m.group("iso_year")), int(m.group("iso_month")), int(m.group("iso_day")))
    except ValueError:
        return None
    return parsed.isoformat()


def assign_party_roles(count: int) -> List[str]:
    """
    Role labels for ``count`` distinct parties, by order of first appearance.

    This is a positional heuristic, not an inference: the first party is
    assumed to be the licensor/provider and every later party the
    licensee/customer. It is wrong for documents with more than two
    parties or with the roles introduced in reverse order.
    """
    return [LICENSOR_ROLE if i == 0 else LICENSEE_ROLE for i in range(count)]


class PatternExtractor:
    """
    Regex-driven extraction of dates, USD amounts and party names.

    Stateless; one instance can be shared and called concurrently.

    Example:
        >>> extractor = PatternExtractor()
        >>> text = "Fee of $75,000 due February 1, 2024 between CloudTech Solutions Inc. and GlobalCorp LLC"
        >>> [f.normalized for f in extractor.extract_amounts(text)]
        ['75,000']
        >>> [f.role for f in extractor.extract_party_names(text)]
        ['Licensor / Provider', 'Licensee / Customer']
    """

    @staticmethod
    def _check_text(text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Expected document text as str, got {type(text).__name__}")

    def extract_dates(self, text: str) -> List[ExtractedField]:
        """
        Find ``Month D, YYYY``, ``MM/DD/YYYY`` and ``YYYY-MM-DD`` dates.

        Duplicates are kept. ``normalized`` is the ISO date, or None when
        the match is not a valid calendar date (e.g. 13/45/2024).
        """
        self._check_text(text)
        return [
            ExtractedField(
                kind=FieldKind.DATE,
                raw_match=m.group(0),
                normalized=_normalize_date(m),
                position=m.start(),
            )
            for m in DATE_PATTERN.finditer(text)
        ]

    def extract_amounts(self, text: str) -> List[ExtractedField]:
        """Find dollar amounts; ``normalized`` drops the ``$`` sign."""
        self._check_text(text)
        return [
            ExtractedField(
                kind=FieldKind.AMOUNT,
                raw_match=m.group(0),
                normalized=m.group(0).replace("$", ""),
                position=m.start(),
                currency=DEFAULT_CURRENCY,
            )
            for m in AMOUNT_PATTERN.finditer(text)
        ]

    def extract_party_names(self, text: str) -> List[ExtractedField]:
        """
        Find company names ending in a legal-entity suffix.

        Plain and quoted matches are merged by position and deduplicated
        on the exact normalized name; the first occurrence fixes the order.
        Roles come from assign_party_roles.
        """
        self._check_text(text)

        quoted = list(QUOTED_PARTY_PATTERN.finditer(text))
        # Plain matches inside a quoted name would split it into a second party
        spans = [m.span() for m in quoted]
        candidates = [
            (m.start(), m.group(0), m.group(0))
            for m in PARTY_PATTERN.finditer(text)
            if not any(start < m.start() < end for start, end in spans)
        ]
        candidates.extend((m.start(), m.group(0), m.group("name").strip()) for m in quoted)
        candidates.sort(key=lambda c: c[0])

        seen = set()
        unique = []
        for position, raw, name in candidates:
            if name in seen:
                continue
            seen.add(name)
            unique.append((position, raw, name))

        roles = assign_party_roles(len(unique))
        return [
            ExtractedField(
                kind=FieldKind.PARTY_NAME,
                raw_match=raw,
                normalized=name,
                position=position,
                role=role,
            )
            for (position, raw, name), role in zip(unique, roles)
        ]

    def extract_all(self, text: str) -> Dict[str, List[ExtractedField]]:
        """All three extractions keyed by "dates", "amounts" and "parties"."""
        return {
            "dates": self.extract_dates(text),
            "amounts": self.extract_amounts(text),
            "parties": self.extract_party_names(text),
        }
