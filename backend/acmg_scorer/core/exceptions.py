"""Custom exceptions for the ACMG evidence scorer."""

from typing import Optional


class AcmgScorerException(Exception):
    """Base exception for all ACMG scorer errors."""
    pass


class EvidenceParsingError(AcmgScorerException, ValueError):
    """An evidence token could not be turned into Evidence."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class UnparseableEvidenceError(EvidenceParsingError):
    """Token does not match the evidence code grammar."""

    def __init__(self, token: str):
        super().__init__(f"unable to parse evidence code {token}", token)


class UnknownEvidenceCodeError(EvidenceParsingError):
    """Token is well formed but names no known ACMG code."""

    def __init__(self, code: str, token: Optional[str] = None):
        super().__init__(f"invalid evidence code {code}", token if token is not None else code)
        self.code = code


class InvalidModifierError(EvidenceParsingError):
    """Known code with a strength suffix that is not a strength name."""

    def __init__(self, modifier: str, token: str):
        super().__init__(f"invalid modifier '{modifier}' for evidence code {token}", token)
        self.modifier = modifier
