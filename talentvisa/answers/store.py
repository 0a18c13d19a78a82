"""
Read-only lookup of prepared and degraded-mode answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from . import content


@dataclass(frozen=True)
class KeywordRule:
    """A degraded-mode answer selected when any keyword occurs in the question."""

    name: str
    keywords: tuple[str, ...]
    answer: str

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against the question."""
        query = query.lower()
        return any(keyword.lower() in query for keyword in self.keywords)


DEFAULT_GUIDED_ANSWERS: dict[str, str] = {
    content.QUESTION_ELIGIBILITY: content.ELIGIBILITY_ANSWER,
    content.QUESTION_PROCESS_AND_FEES: content.PROCESS_AND_FEES_ANSWER,
    content.QUESTION_DOCUMENTS: content.DOCUMENTS_ANSWER,
    content.QUESTION_TIMELINE: content.TIMELINE_ANSWER,
}

DEFAULT_KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        name="eligibility",
        keywords=("申请资格", "资格", "eligibility"),
        answer=content.ELIGIBILITY_SUMMARY,
    ),
)


class StaticAnswerStore:
    """
    Fixed answers that never require a model call.

    Holds the connectivity probe, the guided questions with their curated
    answers, and an ordered keyword rule set that picks a degraded-mode
    answer for free-form questions. fallback_answer() is total: it always
    returns text, ending at the general overview when no rule matches.
    """

    def __init__(
        self,
        guided_answers: dict[str, str] | None = None,
        keyword_rules: Sequence[KeywordRule] | None = None,
        default_answer: str = content.GENERAL_OVERVIEW,
        probe_question: str = content.PROBE_QUESTION,
        probe_answer: str = content.PROBE_ANSWER,
    ):
        """
        Initialize the store.

        Args:
            guided_answers: Exact question -> prepared answer mapping.
            keyword_rules: Rules evaluated in order by fallback_answer().
            default_answer: Answer when no keyword rule matches.
            probe_question: Sentinel question for connectivity checks.
            probe_answer: Acknowledgement returned for the probe.
        """
        if not default_answer:
            raise ValueError("default_answer must be non-empty")

        self._guided = dict(
            DEFAULT_GUIDED_ANSWERS if guided_answers is None else guided_answers
        )
        self.keyword_rules = tuple(
            DEFAULT_KEYWORD_RULES if keyword_rules is None else keyword_rules
        )
        self.default_answer = default_answer
        self.probe_question = probe_question
        self.probe_answer = probe_answer

    @property
    def guided_questions(self) -> tuple[str, ...]:
        """Guided questions in display order."""
        return tuple(self._guided)

    def is_probe(self, question: str) -> bool:
        return question == self.probe_question

    def is_guided(self, question: str) -> bool:
        return question in self._guided

    def guided_answer(self, question: str) -> str | None:
        """Prepared answer for an exact guided question, else None."""
        return self._guided.get(question)

    def fallback_answer(self, question: str) -> str:
        """Pick a degraded-mode answer by keyword; never fails."""
        rule = self.match_rule(question)
        return rule.answer if rule else self.default_answer

    def match_rule(self, question: str) -> KeywordRule | None:
        """First keyword rule matching the question, if any."""
        query = question or ""
        for rule in self.keyword_rules:
            if rule.matches(query):
                return rule
        return None
