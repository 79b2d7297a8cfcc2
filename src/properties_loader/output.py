"""Rendering of loaded properties as YAML, JSON or a rich table."""

import json
from io import StringIO
from pathlib import Path

from rich.table import Table
from rich.text import Text
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError


def validate_yaml(yaml_string: str) -> tuple[bool, str | None]:
    """Validate that a YAML string is parseable.

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    yaml = YAML()
    try:
        yaml.load(StringIO(yaml_string))
        return True, None
    except YAMLError as e:
        return False, f"Invalid YAML output: {e}"


def generate_yaml(properties: dict[str, str], source_path: Path | None = None) -> str:
    """Render properties as a flat YAML mapping, sorted by key.

    Args:
        properties: Decoded properties
        source_path: Optional file the properties came from, noted in a
            leading comment

    Returns:
        The YAML document as a string
    """
    commented = CommentedMap()
    for key in sorted(properties):
        commented[key] = properties[key]
    if source_path is not None:
        commented.yaml_set_start_comment(f"Source: {source_path.name}")

    yaml = YAML()
    yaml.default_flow_style = False
    yaml.width = 4096

    stream = StringIO()
    yaml.dump(commented, stream)
    return stream.getvalue()


def printable(text: str) -> str:
    """Replace lone surrogates with their \\uXXXX escape so the text encodes."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def generate_json(properties: dict[str, str]) -> str:
    """Render properties as a JSON object, sorted by key.

    Lone surrogates are written as JSON \\uXXXX escapes.
    """
    return printable(json.dumps(properties, indent=2, sort_keys=True, ensure_ascii=False))


def build_table(properties: dict[str, str], title: str | None = None) -> Table:
    """Build a two-column rich table of properties, sorted by key."""
    table = Table(title=title, show_lines=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key in sorted(properties):
        table.add_row(Text(printable(key)), Text(printable(properties[key])))
    return table
