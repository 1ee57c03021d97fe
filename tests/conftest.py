"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_logging():
    """The CLI disables logging globally when not verbose; undo it per test."""
    yield
    logging.disable(logging.NOTSET)
