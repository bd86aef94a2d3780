"""Perceptual image hash values and their Hamming distance comparison."""

from __future__ import annotations

from .config import AppConfig, load_config
from .contracts import HashRecordV1, dump_hash_record, load_hash_record
from .errors import HashMatchError, HashRecordError, IncompatibleAlgorithmError
from .hash_value import Hash
from .logging_utils import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "Hash",
    "HashMatchError",
    "HashRecordError",
    "HashRecordV1",
    "IncompatibleAlgorithmError",
    "configure_logging",
    "dump_hash_record",
    "get_logger",
    "load_config",
    "load_hash_record",
]
