"""
Byte-offset indexing of DTA sources, optimized for low-memory usage.

A DTA source is either a single file holding one or more peak lists
separated by blank lines, or a directory holding one ``*.dta`` file per
spectrum. Indexing a file scans it once, line by line, and records where
each peak list starts and how long it is; the text of a spectrum is then
read back on demand with a single seek and read.

segment_blank_lines : Finds the byte ranges of blank-line separated blocks.
build_file_index : Indexes a concatenated DTA file.
build_directory_index : Lists the spectra of a DTA directory.
read_range : Reads the text stored in an indexed byte range.
read_file : Reads the text of a whole single-spectrum file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Tuple

from .constants import DEFAULT_ENCODING, DTA_EXTENSION
from .exceptions import (
    DtaDecodeError,
    SourceUnreadableError,
    SpectrumNotFoundError,
    TruncatedReadError,
)
from .utils import list_dta_files

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class IndexRange:
    """Half-open byte span ``[start, start + size)`` inside a source file."""
    start: int
    size: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")

    @property
    def end(self) -> int:
        return self.start + self.size


def segment_blank_lines(stream: BinaryIO) -> Iterator[IndexRange]:
    """
    Find the byte ranges of the blocks of non-blank lines in a stream.

    A line is blank when nothing but whitespace is left after stripping it,
    so a line holding a single space still separates two blocks. A run of
    blank lines counts as one separator, and leading or trailing blank
    lines never produce a range. Each range covers the lines of its block,
    including their line breaks, and stops where the separating blank line
    starts. A final block with no blank line after it runs to the end of
    the stream.

    Args:
        stream: Binary stream positioned at the start of the source.

    Yields:
        One IndexRange per block, in file order.
    """
    # the line before the first one counts as blank
    previous_blank = True
    block_start = 0
    offset = 0
    for line in stream:
        line_start = offset
        offset += len(line)
        if line.strip():
            if previous_blank:
                block_start = line_start
            previous_blank = False
        else:
            if not previous_blank:
                yield IndexRange(block_start, line_start - block_start)
            previous_blank = True

    if not previous_blank:
        yield IndexRange(block_start, offset - block_start)


@dataclass(frozen=True)
class FileIndex:
    """
    Index of a concatenated DTA file.

    Maps the 1-based ordinal of each spectrum to its byte range. Ordinals
    are contiguous from 1 to ``len(index)``.
    """
    path: str
    ranges: Tuple[IndexRange, ...] = ()

    def __len__(self) -> int:
        return len(self.ranges)

    def __contains__(self, ordinal) -> bool:
        return isinstance(ordinal, int) and 1 <= ordinal <= len(self.ranges)

    def get(self, ordinal: int) -> IndexRange:
        """
        Return the byte range of a spectrum.

        Raises:
            SpectrumNotFoundError: If no spectrum has this ordinal.
        """
        if ordinal not in self:
            raise SpectrumNotFoundError(
                f"Spectrum with index {ordinal} does not exist in {self.path}.")
        return self.ranges[ordinal - 1]

    def ordinals(self) -> range:
        return range(1, len(self.ranges) + 1)


@dataclass(frozen=True)
class DirectoryIndex:
    """
    Index of a directory of single-spectrum DTA files.

    ``filenames`` keeps the order in which the directory was enumerated.
    """
    directory: str
    filenames: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.filenames)

    def __contains__(self, filename) -> bool:
        return filename in self.filenames

    def path_for(self, filename: str) -> str:
        return os.path.join(self.directory, filename)


def build_file_index(path: str) -> FileIndex:
    """
    Index a concatenated DTA file.

    The file is read once from start to end. Nothing is kept open once the
    index is returned.

    Args:
        path: Path to the DTA file.

    Returns:
        The FileIndex of the file.

    Raises:
        SourceUnreadableError: If the file cannot be opened or read.
    """
    logger.debug("Indexing DTA file %s", path)
    try:
        with open(path, "rb") as fin:
            ranges = tuple(segment_blank_lines(fin))
    except OSError as exc:
        raise SourceUnreadableError(f"Failed to read from DTA file {path}: {exc}") from exc
    logger.debug("Indexed %d spectra in %s", len(ranges), path)
    return FileIndex(path=path, ranges=ranges)


def build_directory_index(path: str, extension: str = DTA_EXTENSION) -> DirectoryIndex:
    """
    Index a directory of DTA files.

    Member files are neither opened nor validated here; a directory
    without DTA files gives an empty index.
    """
    filenames = tuple(list_dta_files(path, extension))
    logger.debug("Found %d DTA files in %s", len(filenames), path)
    return DirectoryIndex(directory=path, filenames=filenames)


def _decode_text(data: bytes, encoding: str, origin: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DtaDecodeError(f"Spectrum text in {origin} is not valid {encoding}: {exc}") from exc


def read_range(path: str, index_range: IndexRange, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the text stored in a byte range of a file.

    The file is opened for this call only and is always closed before
    returning or raising.

    Args:
        path: Path to the source file.
        index_range: The range to read.
        encoding: Encoding of the file.

    Returns:
        The decoded text of the range.

    Raises:
        SourceUnreadableError: If the file cannot be opened.
        TruncatedReadError: If the range cannot be read in full.
        DtaDecodeError: If the bytes are not valid in *encoding*.
    """
    try:
        fin = open(path, "rb")
    except OSError as exc:
        raise SourceUnreadableError(f"Failed to open DTA file {path}: {exc}") from exc

    with fin:
        logger.debug("Reading %d bytes at offset %d from %s",
                     index_range.size, index_range.start, path)
        try:
            fin.seek(index_range.start)
            data = fin.read(index_range.size)
        except OSError as exc:
            raise TruncatedReadError(
                f"Failed to read {index_range.size} bytes at offset {index_range.start} "
                f"from {path}: {exc}",
                expected=index_range.size,
            ) from exc

    if len(data) != index_range.size:
        raise TruncatedReadError(
            f"Expected {index_range.size} bytes at offset {index_range.start} "
            f"from {path}, got {len(data)}.",
            expected=index_range.size,
            actual=len(data),
        )
    return _decode_text(data, encoding, path)


def read_file(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the whole text of a single-spectrum DTA file.

    Raises:
        SpectrumNotFoundError: If the file does not exist.
        SourceUnreadableError: If the file exists but cannot be read.
        DtaDecodeError: If the bytes are not valid in *encoding*.
    """
    try:
        with open(path, "rb") as fin:
            data = fin.read()
    except FileNotFoundError as exc:
        raise SpectrumNotFoundError(f"DTA file {path} does not exist.") from exc
    except OSError as exc:
        raise SourceUnreadableError(f"Failed to read from DTA file {path}: {exc}") from exc
    return _decode_text(data, encoding, path)
