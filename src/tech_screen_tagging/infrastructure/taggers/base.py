"""
Tagger base class

A tagger maps a job description to the technologies it mentions. Any concrete
tagger (rule-based, model-backed, remote) can be evaluated by the harness.
"""

from abc import ABC, abstractmethod


class Tagger(ABC):
    """Abstract base class for taggers"""

    name: str = "tagger"

    @abstractmethod
    async def tag(self, input_text: str, augmentation: dict | None = None) -> list[str]:
        """
        Get technologies from a job description

        Args:
            input_text: The job description
            augmentation: Additional input for augmenting the request (optional)

        Returns:
            The technologies found
        """
        pass
