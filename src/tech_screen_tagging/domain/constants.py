"""
Domain Constants

Centrally manages constants shared across the tagging harness.
"""

# A result passes only while it has fewer extra tags than this
PASS_EXTRA_TAG_THRESHOLD = 5

# Technologies dropped from tagger output (case-insensitive)
DEFAULT_BLACKLIST = [
    "Github",
    "Web APIs",
    "Web API",
    "Cloud Services",
    "AI",
    "HTML",
    "Git",
    "Agile",
    "CI/CD",
    "CICD",
    "APIs",
    "SDLC",
    "Web Development",
    "full stack development",
    "Jira",
    "RDBMS",
    ".NET Core",
]

# Supported tagger names
TAGGER_NAMES = ["stub", "keyword", "llm"]

# Default model for the llm tagger
DEFAULT_TAGGER_MODEL = "claude-haiku-4-5-20251001"
