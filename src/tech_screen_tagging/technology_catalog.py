"""
Technology Catalog

Reads the technology names known to the interview question repository.
They serve as the keyword tagger vocabulary and as a hint in tagging prompts.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_technologies(file_path: str | Path) -> list[str]:
    """
    Get all technology names from a question repository file

    Args:
        file_path: Path to a JSON file shaped like {"technologies": {"<name>": [...], ...}}

    Returns:
        list[str]: Technology names in file order (empty if the file cannot be read)
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return list(data["technologies"].keys())
    except (OSError, json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        logger.error("Error reading question repository %s: %s", file_path, e)
        return []
