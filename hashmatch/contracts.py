"""Persisted hash record schema."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import HashRecordError
from .fs_utils import atomic_write_text
from .hash_value import Hash
from .logging_utils import get_logger

_log = get_logger("contracts")


class HashRecordV1(BaseModel):
    """Minimum fields needed to rebuild a comparable :class:`Hash`."""

    model_config = ConfigDict(extra="ignore")

    schema_version: str = Field("v1")
    algorithm_id: int
    bit_resolution: int = Field(..., ge=1)
    payload_hex: str = Field(..., description="Hex of Hash.to_byte_array().")

    @classmethod
    def from_hash(cls, value: Hash) -> "HashRecordV1":
        return cls(
            algorithm_id=value.algorithm_id,
            bit_resolution=value.bit_resolution,
            payload_hex=value.to_byte_array().hex(),
        )

    def to_hash(self) -> Hash:
        try:
            payload = bytes.fromhex(self.payload_hex)
        except ValueError as exc:
            raise HashRecordError(f"Invalid hash payload: {self.payload_hex!r}") from exc
        return Hash.from_byte_array(payload, self.bit_resolution, self.algorithm_id)


def load_hash_record(path: Path | str) -> HashRecordV1:
    record_path = Path(path)
    with record_path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    _log.debug("Loaded hash record from {}", record_path)
    return HashRecordV1.model_validate(data)


def dump_hash_record(record: HashRecordV1, path: Path | str) -> Path:
    record_path = Path(path)
    atomic_write_text(record_path, json.dumps(record.model_dump(), indent=2))
    _log.debug("Wrote hash record to {}", record_path)
    return record_path
