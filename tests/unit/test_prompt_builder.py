"""
Unit tests for the prompt builder.
"""

from talentvisa.assistant import Prompt, PromptBuilder, SYSTEM_PROMPT
from talentvisa.assistant.prompt import RESUME_DIRECTIVES


class TestPromptBuilder:
    """Tests for PromptBuilder."""

    def test_without_context(self):
        """Only the role statement is used when no resume is given."""
        builder = PromptBuilder()
        prompt = builder.build("我该如何申请？")

        assert isinstance(prompt, Prompt)
        assert prompt.instruction == SYSTEM_PROMPT
        assert prompt.user == "我该如何申请？"

    def test_empty_context_is_ignored(self):
        builder = PromptBuilder()
        prompt = builder.build("问题", context="")

        assert prompt.instruction == SYSTEM_PROMPT

    def test_question_passed_through_unmodified(self):
        question = "  Which route fits me?\n"
        prompt = PromptBuilder().build(question, context="Senior engineer")

        assert prompt.user == question

    def test_short_context_included_in_full(self):
        resume = "Senior Backend Engineer at Acme, 6 years of Python."
        prompt = PromptBuilder().build("Which route?", context=resume)

        assert prompt.instruction.startswith(SYSTEM_PROMPT)
        assert resume in prompt.instruction
        assert prompt.instruction.endswith(RESUME_DIRECTIVES)

    def test_long_context_hard_cut_at_limit(self):
        """Exactly the first 1500 characters are embedded, no more."""
        resume = "a" * 1500 + "b" * 500
        prompt = PromptBuilder().build("Which route?", context=resume)

        assert prompt.instruction == (
            f"{SYSTEM_PROMPT}\n\n用户已提供简历信息：{'a' * 1500}\n\n{RESUME_DIRECTIVES}"
        )

    def test_excerpt_no_word_boundary_adjustment(self):
        builder = PromptBuilder(max_context_chars=10)

        assert builder.excerpt("Engineering manager") == "Engineerin"

    def test_excerpt_is_exact_prefix(self):
        resume = "".join(chr(0x4E00 + i % 100) for i in range(3000))
        builder = PromptBuilder()

        assert builder.excerpt(resume) == resume[:1500]
        assert len(builder.excerpt(resume)) == 1500

    def test_directives_present_with_context(self):
        prompt = PromptBuilder().build("问题", context="CTO at a startup")

        assert "用户已提供简历信息：CTO at a startup" in prompt.instruction
        assert "当前或最近职位" in prompt.instruction
        assert "推荐最强的2个评估标准" in prompt.instruction
        assert "提供3个最重要的下一步行动" in prompt.instruction
        assert "•" in prompt.instruction

    def test_custom_system_prompt(self):
        builder = PromptBuilder(system_prompt="You are helpful.")

        assert builder.build("Hi").instruction == "You are helpful."
