"""
ACMG/AMP Evidence Criteria Rule Table
=====================================

The 28 evidence criteria of the ACMG/AMP standards for the interpretation of
sequence variants, keyed by their canonical code (e.g. "PVS1", "BA1").

Reference:
Richards S, et al. Standards and guidelines for the interpretation of sequence
variants: a joint consensus recommendation of the American College of Medical
Genetics and Genomics and the Association for Molecular Pathology.
Genet Med. 2015;17(5):405-424. (Tables 3 and 4)

Code format: <category letter><strength letters><number>
- Category: P (pathogenic), B (benign)
- Strength: A (stand-alone), VS (very strong), S (strong), M (moderate), P (supporting)
"""

from collections import Counter
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..models.evidence import Category, EvidenceCode, EvidenceStrength

P, B = Category.PATHOGENIC, Category.BENIGN
A = EvidenceStrength.STANDALONE
VS = EvidenceStrength.VERY_STRONG
S = EvidenceStrength.STRONG
M = EvidenceStrength.MODERATE
SUP = EvidenceStrength.SUPPORTING

_RULES = [
    # Pathogenic very strong
    (P, VS, 1, "Null variant (nonsense, frameshift, canonical ±1 or 2 splice sites, initiation codon, single or multiexon deletion) in a gene where LOF is a known mechanism of disease"),

    # Pathogenic strong
    (P, S, 1, "Same amino acid change as a previously established pathogenic variant regardless of nucleotide change"),
    (P, S, 2, "De novo (both maternity and paternity confirmed) in a patient with the disease and no family history"),
    (P, S, 3, "Well-established in vitro or in vivo functional studies supportive of a damaging effect on the gene or gene product"),
    (P, S, 4, "The prevalence of the variant in affected individuals is significantly increased compared with the prevalence in controls"),

    # Pathogenic moderate
    (P, M, 1, "Located in a mutational hot spot and/or critical and well-established functional domain (e.g., active site of an enzyme) without benign variation"),
    (P, M, 2, "Absent from controls (or at extremely low frequency if recessive) in Exome Sequencing Project, 1000 Genomes Project, or Exome Aggregation Consortium"),
    (P, M, 3, "For recessive disorders, detected in trans with a pathogenic variant"),
    (P, M, 4, "Protein length changes as a result of in-frame deletions/insertions in a nonrepeat region or stop-loss variants"),
    (P, M, 5, "Novel missense change at an amino acid residue where a different missense change determined to be pathogenic has been seen before"),
    (P, M, 6, "Assumed de novo, but without confirmation of paternity and maternity"),

    # Pathogenic supporting
    (P, SUP, 1, "Cosegregation with disease in multiple affected family members in a gene definitively known to cause the disease"),
    (P, SUP, 2, "Missense variant in a gene that has a low rate of benign missense variation and in which missense variants are a common mechanism of disease"),
    (P, SUP, 3, "Multiple lines of computational evidence support a deleterious effect on the gene or gene product (conservation, evolutionary, splicing impact, etc.)"),
    (P, SUP, 4, "Patient’s phenotype or family history is highly specific for a disease with a single genetic etiology"),
    (P, SUP, 5, "Reputable source recently reports variant as pathogenic, but the evidence is not available to the laboratory to perform an independent evaluation"),

    # Benign stand-alone
    (B, A, 1, "Allele frequency is >5% in Exome Sequencing Project, 1000 Genomes Project, or Exome Aggregation Consortium"),

    # Benign strong
    (B, S, 1, "Allele frequency is greater than expected for disorder"),
    (B, S, 2, "Observed in a healthy adult individual for a recessive (homozygous), dominant (heterozygous), or X-linked (hemizygous) disorder, with full penetrance expected at an early age"),
    (B, S, 3, "Well-established in vitro or in vivo functional studies show no damaging effect on protein function or splicing"),
    (B, S, 4, "Lack of segregation in affected members of a family"),

    # Benign supporting
    (B, SUP, 1, "Missense variant in a gene for which primarily truncating variants are known to cause disease"),
    (B, SUP, 2, "Observed in trans with a pathogenic variant for a fully penetrant dominant gene/disorder or observed in cis with a pathogenic variant in any inheritance pattern"),
    (B, SUP, 3, "In-frame deletions/insertions in a repetitive region without a known function"),
    (B, SUP, 4, "Multiple lines of computational evidence suggest no impact on gene or gene product (conservation, evolutionary, splicing impact, etc.)"),
    (B, SUP, 5, "Variant found in a case with an alternate molecular basis for disease"),
    (B, SUP, 6, "Reputable source recently reports variant as benign, but the evidence is not available to the laboratory to perform an independent evaluation"),
    (B, SUP, 7, "A synonymous (silent) variant for which splicing prediction algorithms predict no impact to the splice consensus sequence nor the creation of a new splice site AND the nucleotide is not highly conserved"),
]


def _build_table() -> Mapping[str, EvidenceCode]:
    table: Dict[str, EvidenceCode] = {}
    for category, strength, number, description in _RULES:
        evidence_code = EvidenceCode(
            category=category, strength=strength, code=number, description=description
        )
        table[evidence_code.key] = evidence_code
    return MappingProxyType(table)


# Read-only after import
EVIDENCE_CODES: Mapping[str, EvidenceCode] = _build_table()


def lookup(code: str) -> Optional[EvidenceCode]:
    """
    Look up an evidence code by its canonical key.

    Args:
        code: Canonical uppercase key such as "PM2"

    Returns:
        The EvidenceCode, or None if the key is not an ACMG criterion
    """
    return EVIDENCE_CODES.get(code)


def all_evidence_codes(category: Optional[Category] = None) -> List[EvidenceCode]:
    """Return rule table entries in display order, optionally for one category."""
    codes = [
        code for code in EVIDENCE_CODES.values()
        if category is None or code.category == category
    ]
    return sorted(codes, key=lambda c: (c.category.rank, c.strength.rank, c.code))


def get_evidence_code_stats() -> Dict[str, Any]:
    """
    Get statistics about the rule table.

    Returns:
        Dictionary with the total and a count per code family (e.g. "PM": 6)
    """
    families = Counter(
        f"{code.category.letter}{code.strength.letters}" for code in EVIDENCE_CODES.values()
    )
    return {
        "total_codes": len(EVIDENCE_CODES),
        "pathogenic_codes": len(all_evidence_codes(Category.PATHOGENIC)),
        "benign_codes": len(all_evidence_codes(Category.BENIGN)),
        "families": dict(families),
    }


# Validation on module load
assert len(EVIDENCE_CODES) == 28, f"Expected 28 ACMG evidence codes, found {len(EVIDENCE_CODES)}"
assert get_evidence_code_stats()["families"] == {
    "PVS": 1, "PS": 4, "PM": 6, "PP": 5, "BA": 1, "BS": 4, "BP": 7
}, "Unexpected ACMG evidence code family sizes"
