"""Evidence data models for the ACMG scorer."""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import ACMG_CLASSIFICATIONS, STRENGTH_POINTS


class Category(str, Enum):
    """Direction of a piece of evidence."""
    PATHOGENIC = "Pathogenic"
    BENIGN = "Benign"

    @property
    def letter(self) -> str:
        """Return the leading letter used in evidence codes."""
        return "P" if self is Category.PATHOGENIC else "B"

    @property
    def rank(self) -> int:
        return list(Category).index(self)


class EvidenceStrength(str, Enum):
    """Weight of a piece of evidence, strongest first."""
    STANDALONE = "StandAlone"
    VERY_STRONG = "VeryStrong"
    STRONG = "Strong"
    MODERATE = "Moderate"
    SUPPORTING = "Supporting"

    @classmethod
    def from_modifier(cls, modifier: str) -> Optional["EvidenceStrength"]:
        """Resolve a modifier suffix (any case) to a strength, or None if unknown."""
        upper = modifier.upper()
        for strength in cls:
            if strength.value.upper() == upper:
                return strength
        return None

    @property
    def letters(self) -> str:
        return _STRENGTH_LETTERS[self]

    @property
    def rank(self) -> int:
        """Return the severity position (0 = StandAlone)."""
        return list(EvidenceStrength).index(self)

    @property
    def points(self) -> int:
        """Return the unsigned point magnitude of this strength."""
        return STRENGTH_POINTS[self.value]


_STRENGTH_LETTERS = {
    EvidenceStrength.STANDALONE: "A",
    EvidenceStrength.VERY_STRONG: "VS",
    EvidenceStrength.STRONG: "S",
    EvidenceStrength.MODERATE: "M",
    EvidenceStrength.SUPPORTING: "P",
}


class AcmgClassification(str, Enum):
    """Five-tier ACMG/AMP variant classification."""
    PATHOGENIC = "Pathogenic"
    LIKELY_PATHOGENIC = "LikelyPathogenic"
    UNCERTAIN_SIGNIFICANCE = "UncertainSignificance"
    LIKELY_BENIGN = "LikelyBenign"
    BENIGN = "Benign"

    @property
    def label(self) -> str:
        """Return the human-readable label, e.g. "Likely pathogenic"."""
        key = "VUS" if self is AcmgClassification.UNCERTAIN_SIGNIFICANCE else self.name
        return ACMG_CLASSIFICATIONS[key]


class EvidenceCode(BaseModel):
    """One entry of the ACMG rule table."""
    model_config = ConfigDict(frozen=True)

    category: Category = Field(..., description="Pathogenic or benign direction")
    strength: EvidenceStrength = Field(..., description="Default strength")
    code: int = Field(..., gt=0, description="Number within the category/strength family")
    description: str = Field(..., description="Published criterion text")

    @property
    def key(self) -> str:
        """Canonical code string, e.g. "PVS1" or "BA1"."""
        return f"{self.category.letter}{self.strength.letters}{self.code}"

    def __str__(self) -> str:
        return self.key


class Evidence(BaseModel):
    """A parsed evidence token: a rule table entry plus an optional strength override."""
    model_config = ConfigDict(frozen=True)

    evidence_code: EvidenceCode
    modifier: Optional[EvidenceStrength] = None

    @property
    def strength(self) -> EvidenceStrength:
        """Effective strength: the modifier if given, else the code's default."""
        return self.evidence_code.strength if self.modifier is None else self.modifier

    @property
    def sort_key(self) -> Tuple[int, int, int, int]:
        code = self.evidence_code
        # Evidence without a modifier sorts before any modified form of the same code.
        modifier_rank = -1 if self.modifier is None else self.modifier.rank
        return code.category.rank, code.strength.rank, code.code, modifier_rank

    def __lt__(self, other: "Evidence") -> bool:
        if not isinstance(other, Evidence):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        if self.modifier is None:
            return self.evidence_code.key
        return f"{self.evidence_code.key}_{self.modifier.value}"


class ScoredEvidence(BaseModel):
    """A single report row."""
    code: str = Field(..., description="Code with optional modifier, e.g. PM2_Supporting")
    points: int = Field(..., description="Signed points contributed")
    description: str


class ClassificationResult(BaseModel):
    """Outcome of classifying one evidence string."""
    evidence: List[ScoredEvidence] = Field(default_factory=list)
    score: int = Field(..., description="Sum of evidence points")
    classification: AcmgClassification
    classification_label: str = Field(..., description="Human-readable classification, e.g. Likely pathogenic")
    posterior_probability: float = Field(..., description="Posterior probability of pathogenicity")
