"""Core constants for the ACMG evidence scorer."""

# ACMG Classification Categories
ACMG_CLASSIFICATIONS = {
    "PATHOGENIC": "Pathogenic",
    "LIKELY_PATHOGENIC": "Likely pathogenic",
    "VUS": "Uncertain significance",
    "LIKELY_BENIGN": "Likely benign",
    "BENIGN": "Benign"
}

# Point magnitude per evidence strength. StandAlone shares the VeryStrong weight.
STRENGTH_POINTS = {
    "StandAlone": 8,
    "VeryStrong": 8,
    "Strong": 4,
    "Moderate": 2,
    "Supporting": 1,
}

# Lower score bound of each classification, most pathogenic first.
# Anything below the last bound is Benign.
CLASSIFICATION_THRESHOLDS = (
    (10, "Pathogenic"),
    (6, "LikelyPathogenic"),
    (0, "UncertainSignificance"),
    (-6, "LikelyBenign"),
)

# Bayesian point system (Tavtigian et al. 2018, 2020)
PRIOR_PROB = 0.1
ODDS_PATH_VERY_STRONG = 350.0
EXPONENTIAL_PROGRESSION = 2.0
SUPPORTING_EVIDENCE_EXPONENT = EXPONENTIAL_PROGRESSION ** -3  # 0.125
ODDS_PATH_SUPPORTING = ODDS_PATH_VERY_STRONG ** SUPPORTING_EVIDENCE_EXPONENT  # ~2.08
