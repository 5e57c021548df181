"""Source name to credibility table.

Compiled from Media Bias/Fact Check, NewsGuard, the Poynter Institute and the
International Fact-Checking Network. Keys are lowercase and trimmed; lookups
are exact-match only.
"""

from types import MappingProxyType

from newsintel.data import CredibilityFactors, CredibilityInfo, CredibilityScore


def _rated(
    score: CredibilityScore,
    rating: int,
    label: str,
    color: str,
    description: str,
    factors: tuple[int, int, int],
) -> CredibilityInfo:
    fact_checking, editorial_standards, transparency = factors
    return CredibilityInfo(
        score=score,
        rating=rating,
        label=label,
        color=color,
        description=description,
        factors=CredibilityFactors(
            fact_checking=fact_checking,
            editorial_standards=editorial_standards,
            transparency=transparency,
        ),
    )


DEFAULT_CREDIBILITY = _rated(
    CredibilityScore.UNKNOWN,
    50,
    "Unknown",
    "#9ca3af",
    "No credibility rating available",
    (50, 50, 50),
)

CREDIBILITY_TABLE = MappingProxyType(
    {
        # High Credibility
        "reuters": _rated(
            CredibilityScore.HIGH,
            95,
            "Very High",
            "#22c55e",
            "Excellent fact-checking record and editorial standards",
            (98, 95, 92),
        ),
        "associated press": _rated(
            CredibilityScore.HIGH,
            95,
            "Very High",
            "#22c55e",
            "Excellent fact-checking record and editorial standards",
            (97, 96, 92),
        ),
        "ap news": _rated(
            CredibilityScore.HIGH,
            95,
            "Very High",
            "#22c55e",
            "Excellent fact-checking record and editorial standards",
            (97, 96, 92),
        ),
        "bbc": _rated(
            CredibilityScore.HIGH,
            92,
            "Very High",
            "#22c55e",
            "Strong editorial standards and fact-checking",
            (93, 94, 89),
        ),
        "bbc news": _rated(
            CredibilityScore.HIGH,
            92,
            "Very High",
            "#22c55e",
            "Strong editorial standards and fact-checking",
            (93, 94, 89),
        ),
        "npr": _rated(
            CredibilityScore.HIGH,
            90,
            "Very High",
            "#22c55e",
            "High quality journalism with strong standards",
            (92, 91, 87),
        ),
        "pbs": _rated(
            CredibilityScore.HIGH,
            90,
            "Very High",
            "#22c55e",
            "High quality journalism with strong standards",
            (91, 92, 87),
        ),
        "the economist": _rated(
            CredibilityScore.HIGH,
            88,
            "Very High",
            "#22c55e",
            "Strong analytical journalism and fact-checking",
            (89, 90, 85),
        ),

        # Medium-High Credibility
        "the new york times": _rated(
            CredibilityScore.MEDIUM_HIGH,
            85,
            "High",
            "#3b82f6",
            "Generally reliable with strong editorial standards",
            (87, 88, 80),
        ),
        "nytimes": _rated(
            CredibilityScore.MEDIUM_HIGH,
            85,
            "High",
            "#3b82f6",
            "Generally reliable with strong editorial standards",
            (87, 88, 80),
        ),
        "the washington post": _rated(
            CredibilityScore.MEDIUM_HIGH,
            85,
            "High",
            "#3b82f6",
            "Generally reliable with strong editorial standards",
            (86, 87, 82),
        ),
        "washington post": _rated(
            CredibilityScore.MEDIUM_HIGH,
            85,
            "High",
            "#3b82f6",
            "Generally reliable with strong editorial standards",
            (86, 87, 82),
        ),
        "the wall street journal": _rated(
            CredibilityScore.MEDIUM_HIGH,
            84,
            "High",
            "#3b82f6",
            "Strong reporting with good fact-checking",
            (85, 86, 81),
        ),
        "wall street journal": _rated(
            CredibilityScore.MEDIUM_HIGH,
            84,
            "High",
            "#3b82f6",
            "Strong reporting with good fact-checking",
            (85, 86, 81),
        ),
        "the guardian": _rated(
            CredibilityScore.MEDIUM_HIGH,
            82,
            "High",
            "#3b82f6",
            "Generally reliable with good standards",
            (83, 84, 79),
        ),
        "cnn": _rated(
            CredibilityScore.MEDIUM_HIGH,
            78,
            "High",
            "#3b82f6",
            "Mostly reliable with some editorial bias",
            (80, 79, 75),
        ),
        "bloomberg": _rated(
            CredibilityScore.MEDIUM_HIGH,
            85,
            "High",
            "#3b82f6",
            "Strong financial journalism and fact-checking",
            (88, 86, 81),
        ),
        "financial times": _rated(
            CredibilityScore.MEDIUM_HIGH,
            85,
            "High",
            "#3b82f6",
            "Strong financial journalism and fact-checking",
            (87, 87, 81),
        ),

        # Medium Credibility
        "fox news": _rated(
            CredibilityScore.MEDIUM,
            65,
            "Medium",
            "#f59e0b",
            "Mixed record on fact-checking and editorial standards",
            (62, 68, 65),
        ),
        "msnbc": _rated(
            CredibilityScore.MEDIUM,
            68,
            "Medium",
            "#f59e0b",
            "Mixed record with some editorial bias",
            (70, 71, 63),
        ),
        "politico": _rated(
            CredibilityScore.MEDIUM_HIGH,
            80,
            "High",
            "#3b82f6",
            "Good political coverage with strong sourcing",
            (82, 81, 77),
        ),
        "axios": _rated(
            CredibilityScore.MEDIUM_HIGH,
            80,
            "High",
            "#3b82f6",
            "Concise reporting with good fact-checking",
            (82, 80, 78),
        ),
        "the hill": _rated(
            CredibilityScore.MEDIUM_HIGH,
            78,
            "High",
            "#3b82f6",
            "Generally reliable political coverage",
            (79, 80, 75),
        ),
        "usa today": _rated(
            CredibilityScore.MEDIUM_HIGH,
            78,
            "High",
            "#3b82f6",
            "Generally reliable mainstream reporting",
            (80, 78, 76),
        ),
        "abc news": _rated(
            CredibilityScore.MEDIUM_HIGH,
            80,
            "High",
            "#3b82f6",
            "Reliable broadcast journalism",
            (82, 81, 77),
        ),
        "cbs news": _rated(
            CredibilityScore.MEDIUM_HIGH,
            80,
            "High",
            "#3b82f6",
            "Reliable broadcast journalism",
            (82, 81, 77),
        ),
        "nbc news": _rated(
            CredibilityScore.MEDIUM_HIGH,
            80,
            "High",
            "#3b82f6",
            "Reliable broadcast journalism",
            (82, 81, 77),
        ),

        # Mixed/Lower Credibility
        "breitbart": _rated(
            CredibilityScore.MIXED,
            45,
            "Mixed",
            "#ef4444",
            "Frequent issues with factual accuracy",
            (40, 48, 47),
        ),
        "huffpost": _rated(
            CredibilityScore.MEDIUM,
            70,
            "Medium",
            "#f59e0b",
            "Opinion-heavy with some factual reporting",
            (72, 70, 68),
        ),
        "huffington post": _rated(
            CredibilityScore.MEDIUM,
            70,
            "Medium",
            "#f59e0b",
            "Opinion-heavy with some factual reporting",
            (72, 70, 68),
        ),
        "newsmax": _rated(
            CredibilityScore.MIXED,
            48,
            "Mixed",
            "#ef4444",
            "Significant issues with factual accuracy",
            (45, 50, 49),
        ),
        "the daily caller": _rated(
            CredibilityScore.MIXED,
            55,
            "Mixed",
            "#ef4444",
            "Mixed record on factual accuracy",
            (52, 58, 55),
        ),

        # Tech Sources
        "techcrunch": _rated(
            CredibilityScore.MEDIUM_HIGH,
            75,
            "High",
            "#3b82f6",
            "Reliable tech journalism",
            (77, 76, 72),
        ),
        "the verge": _rated(
            CredibilityScore.MEDIUM_HIGH,
            75,
            "High",
            "#3b82f6",
            "Reliable tech journalism",
            (76, 77, 72),
        ),
        "wired": _rated(
            CredibilityScore.MEDIUM_HIGH,
            78,
            "High",
            "#3b82f6",
            "Strong tech and science journalism",
            (80, 79, 75),
        ),
        "ars technica": _rated(
            CredibilityScore.MEDIUM_HIGH,
            80,
            "High",
            "#3b82f6",
            "Excellent technical journalism",
            (82, 81, 77),
        ),
    }
)
