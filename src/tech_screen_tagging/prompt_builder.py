"""
Prompt Builder

Builds the prompt asking a model to extract technologies from a job description.

Prompt composition:
- instruction and output format (JSON array of strings)
- optional vocabulary of known technologies (from the question repository)
- optional augmentation input (extra key/value context supplied by the caller)
- the job description
"""

import json

TAGGING_INSTRUCTION = (
    "You extract the technologies a candidate would be screened on from a job description. "
    "List concrete technologies only: languages, frameworks, libraries, databases, "
    "cloud platforms and tools. Do not list soft skills or generic practices."
)

OUTPUT_FORMAT = 'Respond ONLY with a JSON array of strings, e.g. ["Python", "Docker"]'

# Vocabulary hints longer than this are truncated to keep prompts small
MAX_VOCABULARY_HINT = 200


def build_tagging_prompt(
    job_description: str,
    vocabulary: list[str] | None = None,
    augmentation: dict | None = None,
) -> str:
    """
    Build a tagging prompt

    Args:
        job_description: The job description to tag
        vocabulary: Known technology names; the model is asked to prefer these spellings
        augmentation: Additional context rendered as JSON (e.g. company, seniority)

    Returns:
        The prompt string
    """
    parts: list[str] = [TAGGING_INSTRUCTION, ""]

    if vocabulary:
        hint = ", ".join(vocabulary[:MAX_VOCABULARY_HINT])
        parts.append(f"When a technology matches one of these names, use this exact spelling:\n{hint}")
        parts.append("")

    if augmentation:
        parts.append(f"ADDITIONAL CONTEXT:\n{json.dumps(augmentation, ensure_ascii=False, indent=2)}")
        parts.append("")

    parts.append(f"JOB DESCRIPTION:\n{job_description}")
    parts.append("")
    parts.append(OUTPUT_FORMAT)
    return "\n".join(parts)
