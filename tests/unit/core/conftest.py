"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_YAML = """\
documents:
  - id: doc-1
    title: Alpha report
    content: Numbers for the first quarter
    author: {id: a1, name: Ann}
    created: 2024-01-01T00:00:00Z
  - title: Beta notes
    content: Meeting minutes
    author: {id: a2, name: Bo}
    created: 2024-06-01T09:30:00+02:00
"""


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path):
    """A two-document seed file; the second entry has no id."""
    path = tmp_path / "documents.yaml"
    path.write_text(SAMPLE_YAML)
    return path
