"""Rendering of classification results for the console."""

from typing import List

from ..models.evidence import ClassificationResult

SEPARATOR = "--------"


def format_report(result: ClassificationResult) -> str:
    """Render the plain-text report: one line per evidence, then the summary."""
    lines: List[str] = [
        f"{row.code:>4}:{row.points:>2} '{row.description}'" for row in result.evidence
    ]
    lines.append(SEPARATOR)
    lines.append(f"Classification: {result.classification.value}")
    lines.append(f"ACMG Score: {result.score}")
    lines.append(f"Post Prob Path: {result.posterior_probability:.3f}")
    return "\n".join(lines)


def format_json(result: ClassificationResult) -> str:
    return result.model_dump_json(indent=2)
