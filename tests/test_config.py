"""Tests for the configuration record and parse result types"""

import dataclasses

import pytest

from metatrace.args import ArgumentErrorKind, ParseResult
from metatrace.config import TraceConfig


def test_defaults():
    config = TraceConfig("meta.trace")

    assert config.to_dict() == {
        "trace_path": "meta.trace",
        "num_out": 1,
        "randomize": False,
        "start": 0,
        "end": 100,
    }


def test_immutable():
    config = TraceConfig("meta.trace")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.num_out = 3


def test_report_format():
    config = TraceConfig("t.bin", num_out=4, randomize=True, start=20, end=80)

    assert str(config) == (
        "TraceConfig{\n"
        "\ttrace: t.bin,\n"
        "\tnum_out_files: 4,\n"
        "\trandomize: true,\n"
        "\trange: 20%-80%,\n"
        "}"
    )


def test_parse_result_is_tagged():
    success = ParseResult.success(TraceConfig("a"))
    failure = ParseResult.failure(ArgumentErrorKind.UNKNOWN_ARGUMENT, "Unknown argument: x", "x")

    assert success.ok and success.error is None
    assert not failure.ok and failure.config is None
    assert str(failure.error) == "Unknown argument: x"
    assert not failure.error.is_help


def test_parse_result_rejects_both_or_neither():
    with pytest.raises(ValueError):
        ParseResult()
