"""
DTA file reading with indexed random access and sequential iteration.

A DTA source is either one file with blank-line separated spectra or a
directory of single-spectrum ``*.dta`` files. The source is indexed once
when the reader is created; lookups and iteration reuse that index and
read only the bytes of the requested spectrum.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Generator, List, Union

from .constants import DEFAULT_ENCODING, DTA_MS_LEVEL
from .exceptions import (
    InvalidIdentifierError,
    SpectrumNotFoundError,
    UnsupportedOperationError,
)
from .index import (
    DirectoryIndex,
    FileIndex,
    IndexRange,
    build_directory_index,
    build_file_index,
    read_file,
    read_range,
)
from .spectrum import DtaSpectrum
from .utils import parse_ordinal

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class DtaFile:
    """
    Read spectra from a DTA file or a directory of DTA files.

    In a concatenated file spectra are identified by their 1-based ordinal
    (an int or its decimal string). In a directory they are identified by
    their filename, and the identifier order is the directory enumeration
    order.

    Args:
        path: Path to a DTA file or to a directory of DTA files.
        spectrum_class: Class used to decode spectra. Must provide the
            ``from_string(text, index=None, source=None)`` and
            ``from_file(path, encoding=...)`` classmethods of DtaSpectrum.
        encoding: Encoding of the DTA text.

    Raises:
        SourceUnreadableError: If *path* is a file that cannot be read.

    Example::

        reader = DtaFile("run01.dta")
        spec = reader.get_spectrum_by_ordinal(3)
        print(spec.precursor_mz, spec.mz, spec.intensity)

        for spec in reader.iter_spectra():
            print(spec.index, spec.n_peaks)
    """

    def __init__(self,
                 path: Union[str, os.PathLike],
                 spectrum_class=DtaSpectrum,
                 encoding: str = DEFAULT_ENCODING):
        path = os.fspath(path)
        if os.path.isdir(path):
            index = build_directory_index(path)
        else:
            index = build_file_index(path)

        self.path = path
        self.index: Union[FileIndex, DirectoryIndex] = index
        self._spectrum_class = spectrum_class
        self._encoding = encoding
        logger.debug("Opened DTA source %s with %d spectra", path, len(index))

    @property
    def is_directory(self) -> bool:
        return isinstance(self.index, DirectoryIndex)

    def count(self) -> int:
        """Number of spectra in the source."""
        return len(self.index)

    def __len__(self) -> int:
        return self.count()

    def spectrum_ids(self) -> List[str]:
        """
        Identifiers of all spectra, in iteration order.

        Returns:
            The filenames for a directory, otherwise the ordinals
            ``"1"`` to ``"N"`` as strings.
        """
        if self.is_directory:
            return list(self.index.filenames)
        return [str(ordinal) for ordinal in self.index.ordinals()]

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve_ordinal(self, ordinal: Union[int, str]) -> IndexRange:
        """
        Locate a spectrum of a concatenated file.

        Raises:
            InvalidIdentifierError: If the source is a directory or the
                ordinal is not an integer.
            SpectrumNotFoundError: If no spectrum has this ordinal.
        """
        if self.is_directory:
            raise InvalidIdentifierError(
                f"{self.path} is a directory, spectra must be identified by filename.")
        return self.index.get(parse_ordinal(ordinal))

    def resolve_filename(self, filename: str) -> str:
        """
        Locate a spectrum file of a directory.

        The filename is not checked against the index: a missing file is
        reported when it is opened.

        Raises:
            InvalidIdentifierError: If the source is a single file or
                *filename* is not a string.
        """
        if not self.is_directory:
            raise InvalidIdentifierError(
                f"{self.path} is a single DTA file, spectra must be identified by ordinal.")
        if not isinstance(filename, str):
            raise InvalidIdentifierError(
                "Non-filename passed for a DTA directory, the spectrum id must be a filename.")
        return self.index.path_for(filename)

    def read_spectrum_text(self, identifier: Union[int, str]) -> str:
        """Return the undecoded text of a spectrum."""
        if self.is_directory:
            return read_file(self.resolve_filename(identifier), self._encoding)
        return read_range(self.path, self.resolve_ordinal(identifier), self._encoding)

    def get_spectrum_by_ordinal(self, ordinal: Union[int, str]):
        """
        Retrieve a spectrum of a concatenated file by its 1-based ordinal.

        Args:
            ordinal: The ordinal, as an int or a decimal string.

        Returns:
            The decoded spectrum.
        """
        index_range = self.resolve_ordinal(ordinal)
        ordinal = parse_ordinal(ordinal)
        text = read_range(self.path, index_range, self._encoding)
        return self._spectrum_class.from_string(
            text, index=ordinal, source=os.path.basename(self.path))

    def get_spectrum_by_filename(self, filename: str):
        """Retrieve a spectrum of a directory by its filename."""
        path = self.resolve_filename(filename)
        return self._spectrum_class.from_file(path, encoding=self._encoding)

    def get_spectrum_by_id(self, identifier: Union[int, str]):
        """
        Retrieve a spectrum by the identifier matching the source kind.

        Args:
            identifier: A filename for a directory, otherwise an ordinal.
        """
        if self.is_directory:
            return self.get_spectrum_by_filename(identifier)
        return self.get_spectrum_by_ordinal(identifier)

    def get_spectrum_by_position(self, position: int):
        """
        Retrieve the spectrum at a 0-based position in iteration order.

        Raises:
            InvalidIdentifierError: If *position* is not an int.
            SpectrumNotFoundError: If no spectrum is at *position*.
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidIdentifierError(
                f"Spectrum position must be an int, got {position!r}.")
        if self.is_directory:
            if not 0 <= position < len(self.index):
                raise SpectrumNotFoundError(
                    f"Spectrum at position {position} does not exist in {self.path}.")
            return self.get_spectrum_by_filename(self.index.filenames[position])
        return self.get_spectrum_by_ordinal(position + 1)

    def __getitem__(self, position: int):
        return self.get_spectrum_by_position(position)

    @staticmethod
    def get_indexed_spectrum(path: str,
                             index_range: IndexRange,
                             spectrum_class=DtaSpectrum,
                             encoding: str = DEFAULT_ENCODING,
                             ordinal: int = 1):
        """
        Decode the spectrum stored at a known byte range, without indexing.

        Meant for callers that keep the ranges of
        :meth:`get_index_element_for_ids` between sessions. The spectrum
        gets *ordinal* as its index; pass the id the range was stored under.
        """
        text = read_range(path, index_range, encoding)
        return spectrum_class.from_string(
            text, index=parse_ordinal(ordinal), source=os.path.basename(path))

    # -------------------------------------------------------------------------
    # Index introspection
    # -------------------------------------------------------------------------

    def ms_levels(self) -> List[int]:
        return [DTA_MS_LEVEL]

    def get_ms_n_indexes(self, ms_level: int) -> List[IndexRange]:
        """
        Byte ranges of the spectra with the given MS level, in ordinal order.

        Empty for any level other than 2 and for directories.
        """
        if ms_level != DTA_MS_LEVEL or self.is_directory:
            return []
        return list(self.index.ranges)

    def get_index_element_for_ids(self) -> Dict[str, IndexRange]:
        """Map each spectrum id to its byte range. Empty for directories."""
        if self.is_directory:
            return {}
        return {str(ordinal): self.index.get(ordinal) for ordinal in self.index.ordinals()}

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def iter_spectra(self) -> Generator:
        """Iterate over all spectra sequentially."""
        for position in range(self.count()):
            yield self.get_spectrum_by_position(position)

    def __iter__(self) -> "DtaSpectrumIterator":
        return DtaSpectrumIterator(self)


class DtaSpectrumIterator:
    """
    Single-pass iterator over the spectra of a DtaFile.

    Each step looks the next spectrum up in the index and decodes it.
    Iterating the DtaFile again returns a fresh iterator starting from the
    first spectrum.
    """

    def __init__(self, dta_file: DtaFile):
        self._dta_file = dta_file
        self._position = 0

    def __iter__(self) -> "DtaSpectrumIterator":
        return self

    def has_next(self) -> bool:
        index = self._dta_file.index
        if isinstance(index, DirectoryIndex):
            return self._position < len(index)
        return (self._position + 1) in index

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        position = self._position
        self._position += 1
        return self._dta_file.get_spectrum_by_position(position)

    def remove(self):
        raise UnsupportedOperationError("Spectra cannot be removed from a DTA source.")
