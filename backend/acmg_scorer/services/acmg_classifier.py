"""ACMG variant classification service."""

import math
from typing import Iterable, List

import structlog

from ..core.constants import CLASSIFICATION_THRESHOLDS, ODDS_PATH_SUPPORTING, PRIOR_PROB
from ..models.evidence import AcmgClassification, Category, ClassificationResult, Evidence, ScoredEvidence
from .evidence_parser import parse_evidence_string

logger = structlog.get_logger(__name__)


def evidence_points(evidence: Evidence) -> int:
    """Signed points for one piece of evidence, using its effective strength."""
    points = evidence.strength.points
    return points if evidence.evidence_code.category == Category.PATHOGENIC else -points


def total_score(evidences: Iterable[Evidence]) -> int:
    return sum(evidence_points(evidence) for evidence in evidences)


def classify_score(score: int) -> AcmgClassification:
    """Map a total point score to its ACMG classification."""
    for lower_bound, classification in CLASSIFICATION_THRESHOLDS:
        if score >= lower_bound:
            return AcmgClassification(classification)
    return AcmgClassification.BENIGN


def posterior_pathogenic_probability(score: int) -> float:
    """
    Posterior probability of pathogenicity for a point score.

    Each point counts as one supporting-level odds ratio (350 ** 0.125),
    combined with a prior of 0.1.

    Computed in log-odds form, which equals
    (odds * prior) / ((odds - 1) * prior + 1) for odds = 2.08 ** score
    and stays finite for any integer score.
    """
    log_odds = score * math.log(ODDS_PATH_SUPPORTING) + math.log(PRIOR_PROB / (1 - PRIOR_PROB))
    if log_odds >= 0:
        return 1.0 / (1.0 + math.exp(-log_odds))
    odds = math.exp(log_odds)
    return odds / (1.0 + odds)


class ACMGClassifier:
    """Additive point-based ACMG classification of evidence code strings."""

    def score_evidence(self, evidences: Iterable[Evidence]) -> ClassificationResult:
        """Score already parsed, deduplicated and ordered evidence."""
        evidences = list(evidences)
        rows: List[ScoredEvidence] = [
            ScoredEvidence(
                code=str(evidence),
                points=evidence_points(evidence),
                description=evidence.evidence_code.description
            )
            for evidence in evidences
        ]
        score = total_score(evidences)

        classification = classify_score(score)
        logger.info("Classified evidence", score=score, classification=classification.value,
                    evidence=[row.code for row in rows])
        return ClassificationResult(
            evidence=rows,
            score=score,
            classification=classification,
            classification_label=classification.label,
            posterior_probability=posterior_pathogenic_probability(score)
        )

    def classify_evidence(self, acmg_evidence: str) -> ClassificationResult:
        """
        Classify a free-text list of evidence codes, e.g. "PVS1, PM2_Supporting".

        Raises:
            EvidenceParsingError: on the first token that fails to parse
        """
        return self.score_evidence(parse_evidence_string(acmg_evidence))
