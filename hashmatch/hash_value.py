"""Perceptual hash value with Hamming distance comparison.

Hashes are produced by an external algorithm that scans a downscaled image
and appends one bit per image section. The algorithm prepends a constant
leading ``1`` bit (the guard bit) before the data bits so leading zero data
bits survive in an integer that tracks its own width. The stored ``value``
is therefore ``bit_length + 1`` bits wide and the data lives in the low
``bit_length`` bits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from PIL import Image

from .errors import IncompatibleAlgorithmError
from .logging_utils import get_logger
from .rendering import render_hash_image

_log = get_logger("hash")


@dataclass(frozen=True)
class Hash:
    """Image hash bound to the algorithm and settings that produced it.

    Only hashes sharing an ``algorithm_id`` are meaningfully comparable. The
    constructor trusts its producer: ``bit_length`` is not checked against
    the width of ``value`` and the guard bit convention is not verified.
    Equality and hashing use ``(value, algorithm_id)``; ``bit_length`` is
    implied by the algorithm configuration and ignored.
    """

    value: int
    bit_length: int = field(compare=False)
    algorithm_id: int

    @classmethod
    def from_bits(cls, data_bits: int, bit_length: int, algorithm_id: int) -> "Hash":
        """Build a hash from bare data bits, prepending the guard bit."""

        return cls((1 << bit_length) | data_bits, bit_length, algorithm_id)

    @classmethod
    def from_byte_array(cls, payload: bytes, bit_length: int, algorithm_id: int) -> "Hash":
        """Rebuild a hash from the output of :meth:`to_byte_array`.

        A leading zero sign byte carries no bits, so reading the payload as an
        unsigned big-endian integer covers both the stripped and the kept case.
        """

        return cls(int.from_bytes(bytes(payload), "big"), bit_length, algorithm_id)

    @property
    def raw_value(self) -> int:
        return self.value

    @property
    def bit_resolution(self) -> int:
        return self.bit_length

    @property
    def data_bits(self) -> int:
        """Stored value without the guard bit."""

        return self.value & ((1 << self.bit_length) - 1)

    def is_compatible(self, other: "Hash") -> bool:
        return self.algorithm_id == other.algorithm_id

    def hamming_distance(self, other: "Hash") -> int:
        """Return the number of differing bits between two hashes.

        The distance falls within ``[0, bit_length]``. Identical images return
        0, but a distance of 0 does not mean the images are identical. Raises
        :class:`IncompatibleAlgorithmError` if the hashes were produced by
        different algorithms; see :meth:`hamming_distance_fast` to skip the
        check.
        """

        if not self.is_compatible(other):
            _log.debug(
                "Rejected comparison between algoId {} and {}",
                self.algorithm_id,
                other.algorithm_id,
            )
            raise IncompatibleAlgorithmError(self.algorithm_id, other.algorithm_id)
        return self.hamming_distance_fast(other)

    def hamming_distance_fast(self, other: Union["Hash", int]) -> int:
        """Return the Hamming distance without checking the algorithm id.

        ``other`` may be another :class:`Hash` or a bare stored value, e.g. a
        payload read back from an index.
        """

        if isinstance(other, Hash):
            other = other.value
        return (self.value ^ other).bit_count()

    def normalized_hamming_distance(self, other: "Hash") -> float:
        """Hamming distance divided by the bit resolution, within ``[0, 1]``."""

        return self.hamming_distance(other) / float(self.bit_length)

    def normalized_hamming_distance_fast(self, other: "Hash") -> float:
        return self.hamming_distance_fast(other) / float(self.bit_length)

    def to_byte_array(self) -> bytes:
        """Return the big-endian byte form used for persistence.

        Mirrors a two's complement encoding: a sign byte is emitted and then
        dropped again only when the stored width is an exact multiple of 8.
        """

        width = self.value.bit_length()
        encoded = self.value.to_bytes(width // 8 + 1, "big", signed=True)
        if width % 8 != 0:
            return encoded
        return encoded[1:]

    def to_image(self, block_size: int = 1) -> Image.Image:
        """Render the hash bits as a black and white grid.

        The grid is rotated and mirrored relative to the image sections the
        producing algorithm sampled.
        """

        return render_hash_image(self.value, block_size)

    def __str__(self) -> str:
        bits = format(self.data_bits, "b").zfill(self.bit_length) if self.bit_length > 0 else ""
        return f"Hash: {bits} [algoId: {self.algorithm_id}]"
