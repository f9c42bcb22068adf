"""
Step 4: Hearing stage classification (rule-based).
Assign a StageCategory from the free-text purpose using priority-ordered
keyword rules. The first rule with any keyword present wins.
"""
from __future__ import annotations

from packages.shared.models import StageCategory

# Priority-ordered classification rules: (category, keywords_tuple).
# "part heard" must stay ahead of the generic evidence keywords.
STAGE_RULES: list[tuple[StageCategory, tuple[str, ...]]] = [
    (StageCategory.JUDGMENT, ("judgment", "order")),
    (StageCategory.ARGUMENTS, ("argument",)),
    (StageCategory.EVIDENCE_PH, ("part heard",)),
    (StageCategory.EVIDENCE, ("evidence", "witness")),
    (StageCategory.ISSUES, ("issue",)),
    (StageCategory.HEARING, (
        "hearing", "say", "compliance", "summons", "notice",
        "citation", "steps", "awaiting", "amended",
    )),
]


def classify_purpose(purpose: str | None) -> StageCategory:
    text_lower = (purpose or "").lower()
    for category, keywords in STAGE_RULES:
        if any(kw in text_lower for kw in keywords):
            return category
    return StageCategory.OTHER
