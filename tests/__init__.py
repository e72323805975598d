"""ngconfig test package."""

# Test utilities
import json
from pathlib import Path
from typing import Any


def write_config(directory: Path, filename: str, content: Any) -> Path:
    """Write a config file; dicts and lists are serialized as JSON."""
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / filename
    if not isinstance(content, str):
        content = json.dumps(content, indent=2)
    file_path.write_text(content, encoding="utf-8")
    return file_path
