from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Small tag -> implementation table.

    Typical usage:
        BUILDERS = Registry[SvmType, type](_name="estimator_builders")

        @BUILDERS.register(SvmType.C_SVC)
        class CSVCBuilder:
            ...

        builder_cls = BUILDERS.get(SvmType.C_SVC)
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            if key in self._items and self._items[key] is not value:
                raise KeyError(f"{self._name}: {key!r} is already registered")
            self._items[key] = value
            return value

        return deco

    def get(self, key: K) -> V:
        try:
            return self._items[key]
        except KeyError:
            known = ", ".join(repr(k) for k in self._items)
            raise KeyError(f"{self._name}: unknown key {key!r} (known: {known})") from None

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def __contains__(self, key: K) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
