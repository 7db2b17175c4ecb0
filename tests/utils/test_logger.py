import logging

import pytest

from tqsim.errors import UnitarityError
from tqsim.gates import BinaryGate
from tqsim.utils import log


def test_env_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TQSIM_LOGLVL", "DEBUG")
    log.set_default_level("WARN")
    assert log.logger.level == logging.DEBUG

    monkeypatch.setenv("TQSIM_LOGLVL", "NOT-A-LEVEL")
    log.set_default_level("WARN")
    assert log.logger.level == logging.WARN

    monkeypatch.delenv("TQSIM_LOGLVL")
    log.set_default_level("INFO")
    assert log.logger.level == logging.INFO


def test_rejection_logged(caplog: pytest.LogCaptureFixture):
    log.setLevel("DEBUG")
    log.install("circuit-1")
    try:
        with caplog.at_level(logging.DEBUG, logger="tqsim"), pytest.raises(UnitarityError):
            BinaryGate([[1, 1, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
    finally:
        log.install(None)
        log.set_default_level("INFO")
    assert "[circuit-1] rejecting non-unitary matrix" in caplog.text
