"""Parsing of transition label strings into operations."""

from __future__ import annotations

import re

from pcsynth.operations import Nop, Observable, Operation, TransferOperation, TransferType

_NUMBER = re.compile(r"\s*\+?(\d+)")


def _parse_count(text: str) -> int:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"invalid transfer count: {text!r}")
    return int(match.group(1))


def string_to_transfer(label: str) -> TransferOperation | None:
    """Return the transfer operation a label names, or None if it is not one.

    Raises ValueError when the label looks like a transfer but has no count.
    """
    if "in:" in label:
        return TransferOperation(TransferType.IN, _parse_count(label[3:]))
    if "out:" in label:
        return TransferOperation(TransferType.OUT, _parse_count(label[4:]))
    return None


def string_to_operation(label: str) -> Operation:
    """Return the operation a label names: a transfer, a no-op or an observable."""
    transfer = string_to_transfer(label)
    if transfer is not None:
        return transfer
    if label == "nop":
        return Nop()
    return Observable(label)