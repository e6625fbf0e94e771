"""Prompt engineering tools - system prompts, chain-of-thought and few-shot templates."""
from typing import Any

from ...tool_decorator import Tool
from . import CATEGORY

_DEFAULT_CAPABILITIES = (
    "Answer questions related to your role",
    "Provide helpful and accurate information",
    "Escalate complex issues appropriately",
)


def _bullets(items: Any) -> str:
    return "\n".join(f"- {item}" for item in items)


@Tool(
    "generate_system_prompt",
    CATEGORY,
    "Generate system prompts for AI assistants",
    {
        "type": "object",
        "properties": {
            "role": {"type": "string", "description": "e.g. customer support agent"},
            "company": {"type": "string"},
            "tone": {"type": "string", "enum": ["professional", "friendly", "technical", "concise"]},
            "capabilities": {"type": "array", "items": {"type": "string"}},
            "restrictions": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["role"],
    },
)
def generate_system_prompt(
    role: str,
    company: str = "our company",
    tone: str = "professional",
    capabilities: list[str] | None = None,
    restrictions: list[str] | None = None,
) -> dict[str, Any]:
    """Markdown system prompt. The Restrictions section appears only when given."""
    sections = [
        f"You are a {tone} {role} for {company}.",
        "## Your Capabilities\n" + _bullets(capabilities or _DEFAULT_CAPABILITIES),
        "## Guidelines\n" + _bullets([
            f"Always be {tone} and respectful",
            f"Stay focused on your role as {role}",
            "If you don't know something, say so honestly",
            "Never make up information",
        ]),
    ]
    if restrictions:
        sections.append("## Restrictions\n" + _bullets(restrictions))
    sections.append("## Response Format\n" + _bullets([
        "Keep responses clear and concise",
        "Use bullet points for lists",
        "Ask clarifying questions when needed",
    ]))

    prompt = "\n\n".join(sections)
    return {"system_prompt": prompt, "character_count": len(prompt), "role": role, "company": company}


@Tool(
    "chain_of_thought_prompt",
    CATEGORY,
    "Wrap a problem in chain-of-thought reasoning prompt",
    {
        "type": "object",
        "properties": {
            "problem": {"type": "string"},
            "domain": {"type": "string", "enum": ["math", "logic", "business", "coding", "general"]},
        },
        "required": ["problem"],
    },
)
def chain_of_thought_prompt(problem: str, domain: str = "general") -> dict[str, Any]:
    prompt = (
        "Let's think through this step by step.\n\n"
        f"Problem: {problem}\n\n"
        "Please:\n"
        "1. Identify the key components of this problem\n"
        "2. List any assumptions you're making\n"
        "3. Work through the solution systematically\n"
        "4. Show your reasoning at each step\n"
        "5. State your final answer clearly\n"
        "6. Verify the answer makes sense\n\n"
        f"Domain context: {domain}\n\n"
        "Think carefully and show all your work."
    )
    return {"enhanced_prompt": prompt, "original_problem": problem, "domain": domain}


@Tool(
    "few_shot_template",
    CATEGORY,
    "Generate few-shot learning prompt templates",
    {
        "type": "object",
        "properties": {
            "task": {"type": "string"},
            "examples": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {"input": {"type": "string"}, "output": {"type": "string"}},
                },
            },
            "new_input": {"type": "string"},
        },
        "required": ["task", "examples"],
    },
)
def few_shot_template(task: str, examples: list[dict[str, Any]], new_input: str | None = None) -> dict[str, Any]:
    shots = "\n\n".join(
        f"Example {i}:\nInput: {example.get('input', '')}\nOutput: {example.get('output', '')}"
        for i, example in enumerate(examples, start=1)
    )
    prompt = (
        f"Task: {task}\n\n"
        f"Here are some examples:\n\n{shots}\n\n"
        f"Now apply the same pattern to:\nInput: {new_input or '[YOUR INPUT HERE]'}\nOutput:"
    )
    return {"prompt": prompt, "task": task, "example_count": len(examples)}
