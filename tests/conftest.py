"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.mocks import data as mock_data

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture()
def registry():
    from json_field_mapper.transformers.registry import TransformationRegistry

    return TransformationRegistry.default()


@pytest.fixture()
def mapper():
    from json_field_mapper.pipeline.engine import FieldMapper

    return FieldMapper()


@pytest.fixture()
def source_document():
    return mock_data.make_source_document()


@pytest.fixture()
def xml_document():
    return mock_data.make_xml_converted_document()
