"""Lexicon-based sentiment scoring for news articles.

Raw polarity comes from a ``LexiconScorer``; this module owns the banding of
the comparative (per-token) score into a three-way classification. News copy
carries subtle sentiment, so the neutral band is narrow: ±0.05.

Sub-bands only change the emoji and color, never the classification:

    comparative >  0.30   positive  😊
    comparative >  0.05   positive  🙂
    comparative < -0.30   negative  😢
    comparative < -0.05   negative  😟
    otherwise             neutral   😐
"""

import re
from typing import Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from newsintel.data import (
    Article,
    LexicalScore,
    SentimentClassification,
    SentimentResult,
    SentimentSummary,
)

NEUTRAL_BAND = 0.05
MODERATE_BAND = 0.15
STRONG_BAND = 0.3

_TOKEN_STRIP_RE = re.compile(r"[^a-z0-9'\s-]")


class LexiconScorer(Protocol):
    """Interface for word-polarity lexicons."""

    def score(self, text: str) -> LexicalScore:
        """Score text as the sum of token polarities.

        Args:
            text: Text to score.

        Returns:
            Polarity sum, per-token comparative score and the matched tokens.
        """
        ...


class VaderLexiconScorer:
    """Sum word valences from the VADER sentiment lexicon.

    Only the lexicon is used; VADER's rule-based compound score is not, so
    the comparative score is the plain mean valence over all tokens.

    Args:
        lexicon: Optional word → valence mapping overriding the VADER one.
    """

    def __init__(self, lexicon: dict[str, float] | None = None) -> None:
        if lexicon is None:
            lexicon = SentimentIntensityAnalyzer().lexicon
        self._lexicon = lexicon

    def score(self, text: str) -> LexicalScore:
        tokens = tokenize(text)
        total = 0.0
        positive: list[str] = []
        negative: list[str] = []
        for token in tokens:
            valence = self._lexicon.get(token)
            if not valence:
                continue
            total += valence
            if valence > 0:
                positive.append(token)
            else:
                negative.append(token)

        comparative = total / len(tokens) if tokens else 0.0
        return LexicalScore(
            score=total,
            comparative=comparative,
            tokens=tuple(tokens),
            positive=tuple(positive),
            negative=tuple(negative),
        )


def tokenize(text: str) -> list[str]:
    """Lowercase, strip punctuation and split on whitespace."""
    return _TOKEN_STRIP_RE.sub(" ", text.lower()).split()


def classify_comparative(comparative: float) -> tuple[SentimentClassification, str]:
    """Map a comparative score to its classification and emoji."""
    if comparative > NEUTRAL_BAND:
        emoji = "😊" if comparative > STRONG_BAND else "🙂"
        return SentimentClassification.POSITIVE, emoji
    if comparative < -NEUTRAL_BAND:
        emoji = "😢" if comparative < -STRONG_BAND else "😟"
        return SentimentClassification.NEGATIVE, emoji
    return SentimentClassification.NEUTRAL, "😐"


def article_text(article: Article) -> str:
    return f"{article.title} {article.description or ''} {article.content or ''}"


class SentimentAnalyzer:
    """Classify text and articles as positive, neutral or negative.

    Args:
        scorer: Lexicon scorer to delegate raw scoring to. Defaults to
            ``VaderLexiconScorer``.
    """

    def __init__(self, scorer: LexiconScorer | None = None) -> None:
        self._scorer = scorer or VaderLexiconScorer()

    def analyze(self, text: str) -> SentimentResult:
        raw = self._scorer.score(text)
        classification, emoji = classify_comparative(raw.comparative)
        return SentimentResult(
            score=raw.score,
            comparative=raw.comparative,
            classification=classification,
            emoji=emoji,
            tokens=raw.tokens,
            positive=raw.positive,
            negative=raw.negative,
        )

    def analyze_article(self, article: Article) -> SentimentResult:
        """Analyze title, description and content together.

        Long content dilutes per-token polarity toward neutral.
        """
        return self.analyze(article_text(article))

    def aggregate(self, articles: list[Article]) -> SentimentSummary:
        """Average comparative score and per-class counts over articles."""
        results = [self.analyze_article(a) for a in articles]
        counts = _count(results)
        average = sum(r.comparative for r in results) / len(results) if results else 0.0
        return SentimentSummary(
            average_score=average,
            positive_count=counts[SentimentClassification.POSITIVE],
            neutral_count=counts[SentimentClassification.NEUTRAL],
            negative_count=counts[SentimentClassification.NEGATIVE],
            total_count=len(articles),
        )

    def count_by_classification(
        self, articles: list[Article]
    ) -> dict[SentimentClassification, int]:
        return _count([self.analyze_article(a) for a in articles])

    def group_by_sentiment(
        self, articles: list[Article]
    ) -> dict[SentimentClassification, list[Article]]:
        """Partition articles by classification, preserving input order."""
        groups: dict[SentimentClassification, list[Article]] = {
            c: [] for c in SentimentClassification
        }
        for article in articles:
            groups[self.analyze_article(article).classification].append(article)
        return groups


def _count(results: list[SentimentResult]) -> dict[SentimentClassification, int]:
    counts = {c: 0 for c in SentimentClassification}
    for result in results:
        counts[result.classification] += 1
    return counts


def sentiment_color(comparative: float) -> str:
    """CSS color for a comparative score band."""
    if comparative > STRONG_BAND:
        return "rgb(34, 197, 94)"
    if comparative > MODERATE_BAND:
        return "rgb(132, 204, 22)"
    if comparative > NEUTRAL_BAND:
        return "rgb(163, 230, 53)"
    if comparative < -STRONG_BAND:
        return "rgb(239, 68, 68)"
    if comparative < -MODERATE_BAND:
        return "rgb(248, 113, 113)"
    if comparative < -NEUTRAL_BAND:
        return "rgb(251, 146, 60)"
    return "rgb(161, 161, 170)"


def sentiment_gradient(comparative: float) -> str:
    """HSL heat-map color: red at -3, green at +3."""
    normalized = max(-3.0, min(3.0, comparative))
    hue = (normalized + 3) / 6 * 120
    saturation = abs(normalized) * 20 + 40
    return f"hsl({hue:g}, {saturation:g}%, 50%)"
