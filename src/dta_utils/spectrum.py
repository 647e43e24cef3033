"""
DTA spectrum container and peak-list decoding.

A DTA peak list is plain text: an optional run of ``#`` comment lines,
a header line holding the singly protonated precursor mass (MH+) and the
precursor charge, then one ``m/z intensity`` pair per line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .constants import COMMENT_PREFIX, DEFAULT_ENCODING, DTA_MS_LEVEL, PROTON
from .exceptions import DtaDecodeError
from .index import read_file


@dataclass
class DtaSpectrum:
    """Container for a single DTA spectrum."""
    precursor_mh: float
    precursor_charge: int
    mz: np.ndarray
    intensity: np.ndarray
    index: Optional[int] = None
    source: Optional[str] = None
    comments: List[str] = field(default_factory=list)
    ms_level: int = DTA_MS_LEVEL

    @property
    def n_peaks(self) -> int:
        return len(self.mz)

    @property
    def precursor_mz(self) -> float:
        """Precursor m/z computed from MH+ and charge. 0.0 if the charge is unknown."""
        if self.precursor_charge <= 0:
            return 0.0
        z = self.precursor_charge
        return (self.precursor_mh + (z - 1) * PROTON) / z

    @classmethod
    def from_string(cls,
                    text: str,
                    index: Optional[int] = None,
                    source: Optional[str] = None) -> "DtaSpectrum":
        """
        Decode one DTA peak list.

        Args:
            text: The peak list text.
            index: 1-based position of the spectrum in a concatenated file.
            source: Name of the file the text came from.

        Returns:
            A DtaSpectrum.

        Raises:
            DtaDecodeError: If the header is missing or a line is malformed.
        """
        comments: List[str] = []
        header = None
        mz: List[float] = []
        intensity: List[float] = []

        for lineno, raw in enumerate(text.splitlines(), 1):
            line = raw.strip()
            if not line:
                continue
            if header is None and line.startswith(COMMENT_PREFIX):
                comments.append(line[len(COMMENT_PREFIX):].strip())
                continue

            fields = line.split()
            if len(fields) < 2:
                raise DtaDecodeError(
                    f"Line {lineno} of {_describe(index, source)} must hold two values: {raw!r}")
            try:
                if header is None:
                    header = (float(fields[0]), int(fields[1]))
                else:
                    mz.append(float(fields[0]))
                    intensity.append(float(fields[1]))
            except ValueError:
                raise DtaDecodeError(
                    f"Line {lineno} of {_describe(index, source)} is not numeric: {raw!r}") from None

        if header is None:
            raise DtaDecodeError(f"No precursor line found in {_describe(index, source)}.")

        return cls(
            precursor_mh=header[0],
            precursor_charge=header[1],
            mz=np.array(mz, dtype=float),
            intensity=np.array(intensity, dtype=float),
            index=index,
            source=source,
            comments=comments,
        )

    @classmethod
    def from_file(cls, path: str, encoding: str = DEFAULT_ENCODING) -> "DtaSpectrum":
        """Decode a single-spectrum DTA file."""
        text = read_file(path, encoding)
        return cls.from_string(text, source=os.path.basename(path))


def _describe(index: Optional[int], source: Optional[str]) -> str:
    if index is not None:
        return f"spectrum {index}"
    if source is not None:
        return source
    return "spectrum"
