import pytest

from pcsynth.labels import string_to_operation, string_to_transfer
from pcsynth.operations import Nop, Observable, TransferOperation, TransferType


def test_transfer_in():
    assert string_to_transfer("in:2") == TransferOperation(TransferType.IN, 2)


def test_transfer_out():
    assert string_to_transfer("out:12") == TransferOperation(TransferType.OUT, 12)


def test_non_transfer_is_none():
    assert string_to_transfer("engrave") is None
    assert string_to_transfer("nop") is None


def test_transfer_name_round_trip():
    for label in ("in:1", "out:7"):
        assert string_to_transfer(label).name == label


def test_missing_count_raises():
    with pytest.raises(ValueError):
        string_to_transfer("in:x")
    with pytest.raises(ValueError):
        string_to_operation("out:")


def test_operation_nop():
    assert string_to_operation("nop") == Nop()


def test_operation_observable():
    assert string_to_operation("engrave") == Observable("engrave")


def test_operation_transfer():
    assert string_to_operation("out:3") == TransferOperation(TransferType.OUT, 3)