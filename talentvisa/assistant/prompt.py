"""
Prompt builder - assembles the system instruction for a free-form question.
"""

from __future__ import annotations

import logging

from .types import Prompt


logger = logging.getLogger(__name__)


# Role statement used for every free-form question
SYSTEM_PROMPT = (
    "你是英国全球人才签证专家，专门协助Tech Nation数字技术路线申请。"
    "请用中文回答，提供具体可行的建议。"
)

# Appended after the resume excerpt when the user supplied one
RESUME_DIRECTIVES = (
    "请基于用户的具体背景提供个性化建议。要求：\n"
    "1. 必须明确提及用户的当前或最近职位\n"
    "2. 根据经验判断适合哪个路线\n"
    "3. 推荐最强的2个评估标准\n"
    "4. 提供3个最重要的下一步行动\n"
    "\n"
    "格式要求：使用简洁清晰的格式，用 • 作为项目符号，避免过多粗体。"
)


class PromptBuilder:
    """Builds the system instruction, optionally personalised with a resume excerpt."""

    def __init__(
        self,
        max_context_chars: int = 1500,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        """
        Initialize the prompt builder.

        Args:
            max_context_chars: Hard cut applied to the resume before embedding.
            system_prompt: Role statement that opens every instruction.
        """
        self.max_context_chars = max_context_chars
        self.system_prompt = system_prompt

    def build(self, question: str, context: str | None = None) -> Prompt:
        """
        Build the prompt for a question.

        Args:
            question: The user's question, passed through unmodified.
            context: Optional resume text; only a prefix is embedded.

        Returns:
            Prompt with the system instruction and user message.
        """
        instruction = self.system_prompt

        if context:
            excerpt = self.excerpt(context)
            logger.debug(
                f"Resume excerpt sent to model ({len(excerpt)} chars): {excerpt}"
            )
            instruction += (
                f"\n\n用户已提供简历信息：{excerpt}\n\n{RESUME_DIRECTIVES}"
            )

        return Prompt(instruction=instruction, user=question)

    def excerpt(self, context: str) -> str:
        """First max_context_chars characters of the context, verbatim."""
        return context[: self.max_context_chars]
