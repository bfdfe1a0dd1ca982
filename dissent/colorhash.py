"""Hashing of names into stable, readable colours."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Callable, Protocol

_MASK32 = 0xFFFFFFFF

_DJB2_MAGIC = 5381
_FNV32_OFFSET = 2166136261
_FNV32_PRIME = 16777619

_N_HUE = 31  # 31 keeps the pink hue in the palette
_N_SAT = 10
_N_VAL = 10


@dataclass(frozen=True)
class RGBA:
    """An 8-bit-per-channel colour."""

    r: int
    g: int
    b: int
    a: int = 0xFF


class Hash32(Protocol):
    """A 32-bit streaming string hash."""

    def update(self, data: bytes) -> None: ...

    def sum32(self) -> int: ...


class Djb2Hash:
    """The DJB2 string hash, truncated to 32 bits."""

    def __init__(self) -> None:
        self._value = _DJB2_MAGIC

    def update(self, data: bytes) -> None:
        """Feed bytes into the hash."""
        value = self._value
        for byte in data:
            value = ((value << 5) + value + byte) & _MASK32
        self._value = value

    def sum32(self) -> int:
        """Return the current hash value."""
        return self._value

    def digest(self) -> bytes:
        """Return the hash value as four big-endian bytes."""
        return self._value.to_bytes(4, "big")

    def reset(self) -> None:
        """Return the hash to its initial state."""
        self._value = _DJB2_MAGIC


class Fnv32aHash:
    """The 32-bit FNV-1a string hash."""

    def __init__(self) -> None:
        self._value = _FNV32_OFFSET

    def update(self, data: bytes) -> None:
        """Feed bytes into the hash."""
        value = self._value
        for byte in data:
            value ^= byte
            value = (value * _FNV32_PRIME) & _MASK32
        self._value = value

    def sum32(self) -> int:
        """Return the current hash value."""
        return self._value

    def digest(self) -> bytes:
        """Return the hash value as four big-endian bytes."""
        return self._value.to_bytes(4, "big")

    def reset(self) -> None:
        """Return the hash to its initial state."""
        self._value = _FNV32_OFFSET


class Hasher(Protocol):
    """Anything that turns a name into a colour."""

    def hash(self, name: str) -> RGBA: ...


def hsv_to_rgb(h: float, s: float, v: float) -> RGBA:
    """Convert an HSV colour (hue in degrees, s and v in [0, 1]) to RGBA."""
    hp = h / 60.0
    chroma = v * s
    x = chroma * (1.0 - abs(math.fmod(hp, 2.0) - 1.0))
    m = v - chroma

    r = g = b = 0.0
    if 0.0 <= hp < 1.0:
        r, g = chroma, x
    elif 1.0 <= hp < 2.0:
        r, g = x, chroma
    elif 2.0 <= hp < 3.0:
        g, b = chroma, x
    elif 3.0 <= hp < 4.0:
        g, b = x, chroma
    elif 4.0 <= hp < 5.0:
        r, b = x, chroma
    elif 5.0 <= hp < 6.0:
        r, b = chroma, x

    def channel(value: float) -> int:
        return int((m + value) * 0xFF) & 0xFF

    return RGBA(channel(r), channel(g), channel(b), 0xFF)


def rgb_hex(color: RGBA) -> str:
    """Format a colour as an HTML hex string, ignoring alpha."""
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


@dataclass(frozen=True)
class HSVHasher:
    """Hashes names into colours within saturation and value ranges."""

    hash_factory: Callable[[], Hash32]
    saturation: tuple[float, float]
    value: tuple[float, float]

    def hash(self, name: str) -> RGBA:
        """Return the colour for the given name."""
        hasher = self.hash_factory()
        hasher.update(name.encode("utf-8"))
        digest = hasher.sum32()

        hue = float((digest % (_N_HUE + 1)) * (360 // _N_HUE))
        s_lo, s_hi = self.saturation
        v_lo, v_hi = self.value
        sat = s_lo + (digest % (_N_SAT + 1)) / _N_SAT * (s_hi - s_lo)
        val = v_lo + (digest % (_N_VAL + 1)) / _N_VAL * (v_hi - v_lo)
        return hsv_to_rgb(hue, sat, val)


LIGHT_COLOR_HASHER = HSVHasher(Fnv32aHash, (0.3, 0.4), (0.9, 1.0))
"""Pastel colours for use on a dark background."""

DARK_COLOR_HASHER = HSVHasher(Fnv32aHash, (0.9, 1.0), (0.6, 0.7))
"""Darker, stronger colours for use on a light background."""

_default_hasher: Hasher = LIGHT_COLOR_HASHER
_default_lock = threading.Lock()


def default_hasher() -> Hasher:
    """Return the hasher used by default."""
    with _default_lock:
        return _default_hasher


def set_default_hasher(hasher: Hasher) -> None:
    """Replace the hasher used by default."""
    global _default_hasher
    with _default_lock:
        _default_hasher = hasher