"""Pytest fixtures for properties-loader tests."""

from pathlib import Path

import pytest

from properties_loader.loader import loads
from properties_loader.models import Properties

SAMPLE_SOURCE = r"""
# You are reading the ".properties" entry.
! The exclamation mark can also mark text as comments.
website = http://en.wikipedia.org/
language = English
# The backslash below tells the application to continue reading
# the value onto the next line.
message = Welcome to \
          Wikipedia!
# Add spaces to the key
key\ with\ spaces = This is the value that could be looked up with the \
key "key with spaces".
# Empty lines are skipped


# Unicode
unicode=\u041f\u0440\u0438\u0432\u0435\u0442, \u0421\u043e\u0432\u0430!
# Comment
string=found
bool=true
float=4.940656458412465441765687928682213723651e-324
int=-9223372036854775808
uint=18446744073709551615
hex=0xCAFEBABE
"""


@pytest.fixture
def sample_bytes() -> bytes:
    """Return the sample properties document as raw bytes."""
    return SAMPLE_SOURCE.encode("latin-1")


@pytest.fixture
def sample_properties(sample_bytes: bytes) -> Properties:
    """Return the sample properties document, loaded."""
    return loads(sample_bytes)


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """Write the sample properties document to a file and return its path."""
    path = tmp_path / "sample.properties"
    path.write_bytes(sample_bytes)
    return path
