from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterable, Iterator
    from typing import Any

    MapSource = Mapping[Any, Any] | Iterable[tuple[Any, Any]]

C = TypeVar("C")
K = TypeVar("K")
V = TypeVar("V")

# Unique missing object.
_missing = object()

# Get logger for this module.
logger = logging.getLogger(__name__)


class CanonicalizedMap(MutableMapping[K, V], Generic[C, K, V]):
    """
    A mapping whose keys are compared by a canonical form derived from them,
    while still remembering the key the caller actually used.

    Every entry is stored under ``canonicalize(key)`` as a ``(key, value)``
    pair.  Two keys with the same canonical form address the same entry, and
    writing through either of them replaces both the value and the stored
    original key.  Iteration always yields the original keys.

    Lookups accept arbitrary objects.  If ``key_type`` is given, keys that
    are not instances of it are treated as absent; if ``is_valid_key`` is
    given, keys it rejects are treated as absent too.  Neither check ever
    raises - the key simply isn't found.

    The iteration order is that of the backing dict, but callers should not
    rely on it.
    """

    def __init__(
        self,
        canonicalize: Callable[[K], C],
        other: MapSource | None = None,
        is_valid_key: Callable[[Any], bool] | None = None,
        key_type: type | tuple[type, ...] | None = None,
    ) -> None:
        self._canonicalize = canonicalize
        self._is_valid_key_fn = is_valid_key
        self._key_type = key_type
        self._base: dict[C, tuple[K, V]] = {}

        if other is not None:
            self.update(other)

    def _is_valid_key(self, key: object) -> bool:
        if self._key_type is not None and not isinstance(key, self._key_type):
            return False
        return self._is_valid_key_fn is None or bool(self._is_valid_key_fn(key))

    def __getitem__(self, key: object) -> V:
        if not self._is_valid_key(key):
            raise KeyError(key)

        pair = self._base.get(self._canonicalize(key), _missing)  # type: ignore[arg-type]
        if pair is _missing:
            raise KeyError(key)
        return pair[1]  # type: ignore[index]

    def __setitem__(self, key: K, value: V) -> None:
        if not self._is_valid_key(key):
            logger.debug("Ignoring write to invalid key %r", key)
            return
        self._base[self._canonicalize(key)] = (key, value)

    def __delitem__(self, key: object) -> None:
        if not self._is_valid_key(key):
            raise KeyError(key)

        try:
            del self._base[self._canonicalize(key)]  # type: ignore[arg-type]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        if not self._is_valid_key(key):
            return False
        return self._canonicalize(key) in self._base  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        for key, _ in self._base.values():
            yield key

    def __len__(self) -> int:
        return len(self._base)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in other.items():
            if self.get(key, _missing) != value:
                return False
        return True

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._base.values())
        return f"{self.__class__.__name__}({{{inner}}})"

    def remove(self, key: object) -> V | None:
        """
        Removes the entry for ``key`` and returns its value, or None if there
        was no such entry.
        """
        return self.pop(key, None)

    def clear(self) -> None:
        self._base.clear()

    def copy(self) -> CanonicalizedMap[C, K, V]:
        other = copy.copy(self)
        other._base = dict(self._base)
        return other

    def contains_value(self, value: object) -> bool:
        return any(v == value for _, v in self._base.values())

    def put_if_absent(self, key: K, if_absent: Callable[[], V]) -> V:
        """
        Returns the value stored for ``key``.  If there is none, ``if_absent``
        is called and its result is stored under ``key`` first.
        """
        canonical = self._canonicalize(key)
        pair = self._base.get(canonical)
        if pair is None:
            pair = (key, if_absent())
            self._base[canonical] = pair
        return pair[1]

    def setdefault(self, key: K, default: V = None) -> V:  # type: ignore[assignment]
        return self.put_if_absent(key, lambda: default)

    def update_value(
        self,
        key: K,
        update: Callable[[V], V],
        if_absent: Callable[[], V] | None = None,
    ) -> V:
        """
        Replaces the value stored for ``key`` with ``update(old_value)`` and
        returns the new value.

        If ``update`` hands back the very same object, the entry is left
        alone and keeps its original key.  Any other result is stored under
        ``key``, which replaces the original key too.  If there is no entry,
        ``if_absent()`` is stored instead; without ``if_absent`` a KeyError is
        raised.
        """
        canonical = self._canonicalize(key)
        pair = self._base.get(canonical)
        if pair is None:
            if if_absent is None:
                raise KeyError(key)
            value = if_absent()
            self._base[canonical] = (key, value)
            return value

        old_value = pair[1]
        new_value = update(old_value)
        if new_value is not old_value:
            self._base[canonical] = (key, new_value)
        return new_value

    def update_all(self, update: Callable[[K, V], V]) -> None:
        """
        Replaces every value with ``update(key, value)``, called with the
        original key.
        """
        for canonical, (key, value) in list(self._base.items()):
            new_value = update(key, value)
            if new_value is not value:
                self._base[canonical] = (key, new_value)

    def remove_where(self, test: Callable[[K, V], bool]) -> None:
        """Removes every entry for which ``test(key, value)`` is true."""
        doomed = [canonical for canonical, (key, value) in self._base.items() if test(key, value)]
        for canonical in doomed:
            del self._base[canonical]


class CaseInsensitiveMap(CanonicalizedMap[str, str, V]):
    """
    A string-keyed map that ignores the case of its keys.  Non-string lookup
    keys are simply never found.
    """

    def __init__(self, other: MapSource | None = None) -> None:
        super().__init__(str.lower, other, key_type=str)


class ImmutableCaseInsensitiveMap(Mapping[str, V]):
    """
    A read-only, case-insensitive copy of a string-keyed mapping.

    The data is copied once, when the map is created, so later changes to
    the source mapping are not visible through it.
    """

    def __init__(self, other: MapSource | None = None) -> None:
        self._data: CaseInsensitiveMap[V] = CaseInsensitiveMap(other)

    def __getitem__(self, key: object) -> V:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImmutableCaseInsensitiveMap):
            other = other._data
        return self._data.__eq__(other)

    def __hash__(self) -> int:
        return hash(frozenset((key.lower(), value) for key, value in self._data.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"{self.__class__.__name__}({{{inner}}})"

    def mutable_copy(self) -> CaseInsensitiveMap[V]:
        """Returns a new, mutable map holding the same entries."""
        return self._data.copy()  # type: ignore[return-value]
