"""Tests for the exceptions module."""

import pickle

import pytest
from pyteomics.auxiliary import PyteomicsError

from dta_utils.exceptions import (
    DtaDecodeError,
    DtaError,
    InvalidIdentifierError,
    SourceUnreadableError,
    SpectrumNotFoundError,
    TruncatedReadError,
    UnsupportedOperationError,
)


class TestHierarchy:
    @pytest.mark.parametrize("cls, builtin", [
        (SourceUnreadableError, OSError),
        (InvalidIdentifierError, TypeError),
        (SpectrumNotFoundError, KeyError),
        (TruncatedReadError, OSError),
        (DtaDecodeError, ValueError),
        (UnsupportedOperationError, NotImplementedError),
    ])
    def test_bases(self, cls, builtin):
        assert issubclass(cls, DtaError)
        assert issubclass(cls, PyteomicsError)
        assert issubclass(cls, builtin)

    def test_str_is_message(self):
        assert str(SpectrumNotFoundError("Spectrum with index 4 does not exist.")) == \
            "Spectrum with index 4 does not exist."


class TestArgs:
    @pytest.mark.parametrize("cls", [SourceUnreadableError, InvalidIdentifierError,
                                     SpectrumNotFoundError, DtaDecodeError])
    def test_args_keep_message(self, cls):
        exc = cls("bad source")
        assert exc.args == ("bad source",)
        assert "bad source" in repr(exc)

    def test_truncated_read_args(self):
        exc = TruncatedReadError("short read", expected=10, actual=3)
        assert exc.args == ("short read",)
        assert repr(exc) == "TruncatedReadError('short read')"

    def test_truncated_read_pickle(self):
        exc = TruncatedReadError("short read", expected=10, actual=3)
        restored = pickle.loads(pickle.dumps(exc))
        assert isinstance(restored, TruncatedReadError)
        assert str(restored) == "short read"
        assert restored.expected == 10
        assert restored.actual == 3
