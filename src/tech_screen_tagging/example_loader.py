"""
Example Loader

Loads labeled training screens from a directory of JSON files.

File format:
    {"id": "...", "jobDescription": "...", "technologies": ["...", ...]}
"""

import json
import logging
from pathlib import Path

from tech_screen_tagging.domain.entities import LabeledExample
from tech_screen_tagging.domain.errors import MalformedExampleError, StorageUnavailableError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["jobDescription", "technologies"]


def _parse_example_data(data: dict, path: Path) -> LabeledExample:
    """
    Create a LabeledExample from dictionary data

    Args:
        data: Training screen dictionary
        path: Source file (its stem is the fallback identifier)

    Returns:
        LabeledExample

    Raises:
        MalformedExampleError: If a required field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise MalformedExampleError(f"Training screen is not a JSON object: {path}")

    for field in REQUIRED_FIELDS:
        if field not in data:
            raise MalformedExampleError(f"Required field '{field}' is missing: {path}")

    job_description = data["jobDescription"]
    technologies = data["technologies"]
    if not isinstance(job_description, str):
        raise MalformedExampleError(f"Field 'jobDescription' must be a string: {path}")
    if not isinstance(technologies, list) or not all(isinstance(t, str) for t in technologies):
        raise MalformedExampleError(f"Field 'technologies' must be a list of strings: {path}")

    return LabeledExample(
        identifier=str(data.get("id") or path.stem),
        input_text=job_description,
        expected_labels=list(technologies),
        source=str(path),
    )


def load_example(file_path: str | Path) -> LabeledExample:
    """
    Load a single training screen JSON

    Args:
        file_path: Path to the training screen JSON file

    Returns:
        LabeledExample

    Raises:
        MalformedExampleError: If the file cannot be read, is not valid JSON, or lacks a field
    """
    path = Path(file_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedExampleError(f"Cannot read training screen {path}: {e}") from e
    return _parse_example_data(data, path)


class TrainingScreenLoader:
    """
    Lists training screens from a directory

    Files are returned sorted by filename so that index-based slicing is
    reproducible across runs.
    """

    def __init__(self, examples_dir: str | Path) -> None:
        self.examples_dir = Path(examples_dir)

    def list_files(self) -> list[Path]:
        """
        List training screen files in filename order

        Raises:
            StorageUnavailableError: If the directory does not exist or cannot be read
        """
        if not self.examples_dir.is_dir():
            raise StorageUnavailableError(f"Training screens directory does not exist: {self.examples_dir}")
        try:
            return sorted(self.examples_dir.glob("*.json"), key=lambda p: p.name)
        except OSError as e:
            raise StorageUnavailableError(f"Cannot list training screens in {self.examples_dir}: {e}") from e

    def list_examples(self) -> list[LabeledExample]:
        """
        Load every training screen in the directory

        A file that cannot be parsed does not abort the listing; it is returned
        as an example with load_error set so the runner can report it.

        Returns:
            list[LabeledExample]: Examples in filename order

        Raises:
            StorageUnavailableError: If the directory does not exist or cannot be read
        """
        examples = []
        for path in self.list_files():
            try:
                examples.append(load_example(path))
            except MalformedExampleError as e:
                logger.warning("Skipping malformed training screen %s: %s", path.name, e)
                examples.append(
                    LabeledExample(
                        identifier=path.stem,
                        input_text=None,
                        expected_labels=None,
                        source=str(path),
                        load_error=str(e),
                    )
                )
        return examples
