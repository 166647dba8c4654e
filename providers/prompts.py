"""Prompt text shared by the language-model providers."""

STEP_BY_STEP_TEMPLATE = "Solve this math problem step-by-step: {question}"


def step_by_step_prompt(question: str) -> str:
    return STEP_BY_STEP_TEMPLATE.format(question=question)
