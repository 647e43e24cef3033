"""
dta-utils: Random-access reading of DTA mass spectrometry peak lists.

Modules:
    reader     - DtaFile: indexed lookup and iteration over a DTA file or directory
    index      - Blank-line segmentation, byte-range indexes, range reading
    spectrum   - DtaSpectrum container and peak-list decoding
    exceptions - Error hierarchy
    constants  - File-format and physical constants
    utils      - Identifier parsing, DTA file discovery
"""

__version__ = "0.1.0"

# reader
from .reader import DtaFile, DtaSpectrumIterator

# index
from .index import (
    IndexRange,
    FileIndex,
    DirectoryIndex,
    segment_blank_lines,
    build_file_index,
    build_directory_index,
    read_range,
    read_file,
)

# spectrum
from .spectrum import DtaSpectrum

# exceptions
from .exceptions import (
    DtaError,
    SourceUnreadableError,
    InvalidIdentifierError,
    SpectrumNotFoundError,
    TruncatedReadError,
    DtaDecodeError,
    UnsupportedOperationError,
)

# constants (commonly used)
from .constants import DTA_EXTENSION, DTA_MS_LEVEL, PROTON

# utils
from .utils import parse_ordinal, is_dta_filename, list_dta_files

__all__ = [
    # version
    "__version__",
    # reader
    "DtaFile",
    "DtaSpectrumIterator",
    # index
    "IndexRange",
    "FileIndex",
    "DirectoryIndex",
    "segment_blank_lines",
    "build_file_index",
    "build_directory_index",
    "read_range",
    "read_file",
    # spectrum
    "DtaSpectrum",
    # exceptions
    "DtaError",
    "SourceUnreadableError",
    "InvalidIdentifierError",
    "SpectrumNotFoundError",
    "TruncatedReadError",
    "DtaDecodeError",
    "UnsupportedOperationError",
    # constants
    "DTA_EXTENSION",
    "DTA_MS_LEVEL",
    "PROTON",
    # utils
    "parse_ordinal",
    "is_dta_filename",
    "list_dta_files",
]
