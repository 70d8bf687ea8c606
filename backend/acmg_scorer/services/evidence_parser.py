"""Evidence string parsing service."""

import re
from typing import Iterable, List

import structlog

from ..core.evidence_codes import lookup
from ..core.exceptions import InvalidModifierError, UnknownEvidenceCodeError, UnparseableEvidenceError
from ..models.evidence import Evidence, EvidenceStrength

logger = structlog.get_logger(__name__)

_BRACKETS = re.compile(r"[\[\]]")
_SEPARATORS = re.compile(r"[ ,]+")
# Group 1 is the code looked up in the rule table, group 3 the optional strength modifier.
EVIDENCE_PATTERN = re.compile(r"([BP][AVSMP]{1,2}\d)(_([A-Z]+))?")


def normalize_input(acmg_evidence: str) -> List[str]:
    """
    Split a free-text evidence string into tokens.

    Square brackets are dropped and the rest is split on runs of spaces
    and commas. An empty string yields a single empty token.
    """
    cleaned = _BRACKETS.sub("", acmg_evidence).strip()
    return _SEPARATORS.split(cleaned)


def parse_evidence(token: str) -> Evidence:
    """
    Parse one token such as "PM2" or "pm2_supporting".

    Raises:
        UnparseableEvidenceError: token does not look like an evidence code
        UnknownEvidenceCodeError: code is not in the ACMG rule table
        InvalidModifierError: suffix is not a strength name
    """
    upper = token.upper()
    match = EVIDENCE_PATTERN.search(upper)
    if not match:
        raise UnparseableEvidenceError(token)

    code = match.group(1)
    evidence_code = lookup(code)
    if evidence_code is None:
        raise UnknownEvidenceCodeError(code, token)

    modifier = None
    suffix = match.group(3)
    if suffix:
        modifier = EvidenceStrength.from_modifier(suffix)
        if modifier is None:
            raise InvalidModifierError(suffix, upper)

    evidence = Evidence(evidence_code=evidence_code, modifier=modifier)
    logger.debug("Parsed evidence token", token=token, evidence=str(evidence))
    return evidence


def collect_evidence(evidences: Iterable[Evidence]) -> List[Evidence]:
    """Drop duplicate evidence and return the rest in display order."""
    return sorted(set(evidences))


def parse_evidence_string(acmg_evidence: str) -> List[Evidence]:
    """Parse a whole evidence string; the first bad token aborts with its error."""
    tokens = normalize_input(acmg_evidence)
    evidences = [parse_evidence(token) for token in tokens]
    collected = collect_evidence(evidences)
    logger.debug("Collected evidence", tokens=len(tokens), distinct=len(collected))
    return collected
