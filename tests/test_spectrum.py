"""Tests for the spectrum module."""

import numpy as np
import pytest

from dta_utils.constants import PROTON
from dta_utils.exceptions import DtaDecodeError, SpectrumNotFoundError
from dta_utils.spectrum import DtaSpectrum


class TestFromString:
    def test_basic(self):
        spec = DtaSpectrum.from_string("1000.5 2\n100.0 10.0\n200.0 20.5\n", index=3)
        assert spec.precursor_mh == pytest.approx(1000.5)
        assert spec.precursor_charge == 2
        np.testing.assert_allclose(spec.mz, [100.0, 200.0])
        np.testing.assert_allclose(spec.intensity, [10.0, 20.5])
        assert spec.n_peaks == 2
        assert spec.index == 3
        assert spec.ms_level == 2

    def test_precursor_mz(self):
        spec = DtaSpectrum.from_string("1000.5 2\n")
        assert spec.precursor_mz == pytest.approx((1000.5 + PROTON) / 2)

    def test_singly_charged(self):
        spec = DtaSpectrum.from_string("500.25 1\n")
        assert spec.precursor_mz == pytest.approx(500.25)

    def test_unknown_charge(self):
        spec = DtaSpectrum.from_string("500.25 0\n")
        assert spec.precursor_mz == 0.0

    def test_comments(self):
        spec = DtaSpectrum.from_string("# scan 12\n#title\n800.0 3\n150.0 1.0\n")
        assert spec.comments == ["scan 12", "title"]
        assert spec.n_peaks == 1

    def test_extra_columns_and_blank_lines(self):
        spec = DtaSpectrum.from_string("\n800.0 3 extra\n\n150.0 1.0 x\n \n")
        assert spec.precursor_charge == 3
        np.testing.assert_allclose(spec.mz, [150.0])

    def test_no_peaks(self):
        spec = DtaSpectrum.from_string("800.0 3")
        assert spec.n_peaks == 0
        assert spec.mz.dtype == float

    def test_missing_header(self):
        with pytest.raises(DtaDecodeError):
            DtaSpectrum.from_string("# only a comment\n")

    def test_single_value_line(self):
        with pytest.raises(DtaDecodeError, match="Line 2 of spectrum 4"):
            DtaSpectrum.from_string("800.0 3\n150.0\n", index=4)

    def test_non_numeric(self):
        with pytest.raises(DtaDecodeError, match="not numeric"):
            DtaSpectrum.from_string("A B\n")

    def test_non_integer_charge(self):
        with pytest.raises(DtaDecodeError):
            DtaSpectrum.from_string("800.0 2.5\n")


class TestFromFile:
    def test_source_is_filename(self, tmp_path):
        path = tmp_path / "scan_0001.2.dta"
        path.write_text("1200.0 2\n300.0 4.0\n")
        spec = DtaSpectrum.from_file(str(path))
        assert spec.source == "scan_0001.2.dta"
        assert spec.index is None
        assert spec.n_peaks == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpectrumNotFoundError):
            DtaSpectrum.from_file(str(tmp_path / "missing.dta"))

    def test_decode_error_names_file(self, tmp_path):
        path = tmp_path / "broken.dta"
        path.write_text("not a spectrum\n")
        with pytest.raises(DtaDecodeError, match="broken.dta"):
            DtaSpectrum.from_file(str(path))
