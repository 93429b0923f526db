"""
Numlens Collections

Immutable lookup tables used by the decoder.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value

K = TypeVar("K")
V = TypeVar("V")


# Classes --------------------------------------------------------------------------------------------------------------

class BiDirectionalMap(Mapping[K, V], Generic[K, V]):
    """
    Frozen one-to-one table, readable from both sides.

    Forward lookups (key -> value) follow the Mapping protocol, so `x in table` tests keys.
    Reverse lookups go through get_key().

    Example:
        >>> markers = BiDirectionalMap({"hex": "0x", "bin": "0b"})
        >>> markers.get_key("0x")
        'hex'
    """

    __slots__ = ("_forward", "_inverse")

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        pairs = list(initial.items() if isinstance(initial, Mapping) else (initial or ()))
        forward: dict[K, V] = {}
        inverse: dict[V, K] = {}
        for key, value in pairs:
            if key in forward:
                raise ValueError(f"Key {fmt_value(key)} already exists (maps to {forward[key]!r})")
            if value in inverse:
                raise ValueError(f"Value {fmt_value(value)} already exists (mapped from {inverse[value]!r})")
            forward[key] = value
            inverse[value] = key
        self._forward = frozendict(forward)
        self._inverse = frozendict(inverse)

    def __getitem__(self, key: K) -> V:
        return self._forward[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def get_key(self, value: V) -> K:
        return self._inverse[value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._forward)!r})"
