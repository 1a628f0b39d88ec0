"""Shared test fixtures for the soapenv test suite."""

from __future__ import annotations

import pytest

from soapenv.config import reset_envelope_config
from soapenv.models import Client, Definitions, Process, Request
from soapenv.tokens import EndElement, StartElement

SERVICE_NS = "http://example.com/service"


class RecordingWriter:
    """TokenWriter that keeps every token it is given."""

    def __init__(self):
        self.tokens = []
        self.flushed = 0

    def write_token(self, token):
        self.tokens.append(token)

    def flush(self):
        self.flushed += 1


def assert_balanced(tokens):
    """Replay tokens on a stack: no underflow, no mismatch, nothing left open."""
    stack = []
    for token in tokens:
        if isinstance(token, StartElement):
            stack.append(token.name)
        elif isinstance(token, EndElement):
            assert stack, f"end tag {token.name} with nothing open"
            assert stack.pop() == token.name
    assert stack == []


@pytest.fixture(autouse=True)
def _reset_config():
    """Each test starts (and ends) with the built-in envelope defaults."""
    reset_envelope_config()
    yield
    reset_envelope_config()


@pytest.fixture
def definitions():
    return Definitions.for_namespace(SERVICE_NS)


@pytest.fixture
def recording_writer():
    return RecordingWriter()


@pytest.fixture
def make_process(definitions):
    """Factory for a Process with sensible defaults."""

    def _make(
        params=None,
        method="GetUser",
        header_params=None,
        header_name="",
        prefix_namespace="",
        namespace="",
        defs=definitions,
    ):
        client = Client(
            definitions=defs,
            header_params=header_params if header_params is not None else {},
            header_name=header_name,
        )
        request = Request(
            method=method, params=params, prefix_namespace=prefix_namespace, namespace=namespace
        )
        return Process(client, request)

    return _make


@pytest.fixture
def balanced():
    return assert_balanced
