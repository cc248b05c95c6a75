"""Keyword-scoring category classifiers.

Both classifiers are additive and max-by-score: a category must score
strictly higher than every earlier category to win, so ties go to the
category listed first in the taxonomy. A zero score everywhere yields
"Other".
"""

from __future__ import annotations

from spendwise.domain.taxonomy import CHAT_CATEGORY_KEYWORDS, CATEGORIES, OTHER, RECEIPT_CATEGORY_KEYWORDS, KeywordTable

# Receipt scoring weights
RAW_TEXT_MATCH_WEIGHT = 2
MERCHANT_CONTAINS_WEIGHT = 5
MERCHANT_PREFIX_WEIGHT = 10


def _best_category(scores: dict[str, int]) -> str:
    best_category = OTHER
    max_score = 0
    for category in CATEGORIES:
        score = scores.get(category, 0)
        if score > max_score:
            max_score = score
            best_category = category
    return best_category


def classify_category(
    text: str,
    merchant_hint: str | None = None,
    *,
    keywords: KeywordTable = CHAT_CATEGORY_KEYWORDS,
) -> str:
    """Classify free text into one category by counting distinct keywords present.

    A keyword scores once however often it appears in the text or merchant hint.
    """
    combined = f"{text} {merchant_hint or ''}".lower()
    scores = {
        category: sum(1 for keyword in keywords.get(category, ()) if keyword in combined)
        for category in CATEGORIES
    }
    return _best_category(scores)


def score_receipt_categories(
    raw_text: str,
    merchant_name: str = "",
    *,
    keywords: KeywordTable = RECEIPT_CATEGORY_KEYWORDS,
) -> dict[str, int]:
    """Weighted receipt scores per category.

    Each keyword occurrence in the raw text adds 2, a keyword contained in the
    merchant name adds 5, and a merchant name equal to or starting with the
    keyword adds a further 10.
    """
    lower_text = raw_text.lower()
    lower_merchant = merchant_name.strip().lower()

    scores: dict[str, int] = {}
    for category in CATEGORIES:
        score = 0
        for keyword in keywords.get(category, ()):
            score += lower_text.count(keyword) * RAW_TEXT_MATCH_WEIGHT
            if lower_merchant and keyword in lower_merchant:
                score += MERCHANT_CONTAINS_WEIGHT
                if lower_merchant == keyword or lower_merchant.startswith(keyword):
                    score += MERCHANT_PREFIX_WEIGHT
        scores[category] = score
    return scores


def classify_receipt_category(
    raw_text: str,
    merchant_name: str = "",
    *,
    keywords: KeywordTable = RECEIPT_CATEGORY_KEYWORDS,
) -> str:
    """Pick the receipt category with the highest weighted score."""
    return _best_category(score_receipt_categories(raw_text, merchant_name, keywords=keywords))
