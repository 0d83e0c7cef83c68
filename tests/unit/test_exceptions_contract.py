"""Contract tests for the spendcube exception hierarchy.

Verifies that:
1. Checkpoint errors inherit from SpendcubeError
2. All error classes carry stable, distinct error codes
3. Details passed as keywords are kept on the instance
"""

from __future__ import annotations

import pytest

from spendcube.core.exceptions import (
    CheckpointConfigError,
    CheckpointInitError,
    SpendcubeError,
)


@pytest.mark.parametrize("cls", [CheckpointConfigError, CheckpointInitError])
def test_subclasses_inherit_from_base(cls) -> None:
    assert issubclass(cls, SpendcubeError)


def test_error_codes_are_stable() -> None:
    assert SpendcubeError.code == "INTERNAL_ERROR"
    assert CheckpointConfigError.code == "CONFIGURATION_ERROR"
    assert CheckpointInitError.code == "DB_CONNECTION_ERROR"


def test_error_keeps_message_and_details() -> None:
    err = CheckpointConfigError("bad pool", pool_size=0)
    assert str(err) == "bad pool"
    assert err.message == "bad pool"
    assert err.details == {"pool_size": 0}
