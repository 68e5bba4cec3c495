"""Pytest fixtures for CLI command tests."""

import json
import logging
import os

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each command in an empty git root so no config file is discovered."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("LDGRAPH_"):
            monkeypatch.delenv(name, raising=False)
    yield tmp_path
    package_logger = logging.getLogger("ldgraph")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON value to a file in the test directory and return its path."""

    def _write(data, name="doc.jsonld"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def people_doc(write_json):
    return write_json(
        {
            "@context": "https://schema.org",
            "@graph": [
                {
                    "@id": "http://example.org/ann",
                    "@type": "Person",
                    "name": "Ann",
                    "knows": {"@id": "http://example.org/ben"},
                },
                {"@id": "http://example.org/ben", "@type": "Person", "name": "Ben", "age": 40},
            ],
        }
    )
