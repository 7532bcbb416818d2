import logging
from dataclasses import dataclass

from subjects.registry import SubjectRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Matched:
    subject: str


@dataclass(frozen=True)
class Unmatched:
    pass


UNMATCHED = Unmatched()


def classify(message: str, registry: SubjectRegistry):
    """
    Map a free-text question to the first allowed subject it mentions.

    Rules:
    1. Blank input is never matched.
    2. Matching is a case-insensitive literal substring test.
    3. Subjects are tried in registry order, keywords in declared order.
       The first hit wins; there is no scoring.
    """
    if not message or not message.strip():
        return UNMATCHED

    lowered = message.lower()

    for subject, keywords in registry:
        for keyword in keywords:
            if keyword in lowered:
                logger.debug(f"Keyword {keyword!r} matched subject {subject}")
                return Matched(subject)

    return UNMATCHED
