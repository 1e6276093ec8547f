"""Keyed registry shared by the extension catalog and the renderers.

A :class:`Registry` maps string keys to items.  It is used in two ways
in this package:

* as a plugin registry, where output formats register their renderer
  class with a decorator and the command line creates one by key;
* as a data table, where the extension catalog adds one descriptor per
  lookup key and then freezes the registry so it can be shared between
  callers without coordination.

Example usage::

    renderer_registry = Registry("renderer")

    @renderer_registry.register("json")
    class JsonRenderer(InfoRenderer):
        ...

    renderer = renderer_registry.create("json")

    table = Registry("extension", casefold=True)
    table.add("Zicsr", descriptor)
    table.freeze()
    table.get("ZICSR")   # -> descriptor
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

T = TypeVar("T")


class Registry:
    """A registry of items keyed by string.

    Keys are unique.  When ``casefold`` is set, keys are lowercased on
    insertion and on every lookup, so ``"Zba"`` and ``"zba"`` address the
    same entry.  Insertion order is preserved by :meth:`keys`.
    """

    def __init__(self, name: str = "registry", casefold: bool = False) -> None:
        """Initialize the registry.

        Args:
            name: Human-readable name for error messages.
            casefold: Lowercase keys on insertion and lookup.
        """
        self._name = name
        self._casefold = casefold
        self._items: Dict[str, Any] = {}
        self._frozen = False

    def _key(self, key: str) -> str:
        return key.lower() if self._casefold else key

    def _check_writable(self, key: str) -> None:
        if self._frozen:
            raise RuntimeError(f"{self._name}: registry is frozen, cannot add '{key}'")
        if self._key(key) in self._items:
            existing = self._items[self._key(key)]
            label = getattr(existing, "__name__", repr(existing))
            raise ValueError(
                f"{self._name}: key '{key}' already registered "
                f"to {label}"
            )

    # ------------------------------------------------------------------
    # Class registration

    def register(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Decorator to register a class with the given key.

        Args:
            key: The key to register the class under.

        Returns:
            A decorator that registers the class.

        Raises:
            ValueError: If the key is already registered.
            RuntimeError: If the registry is frozen.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            self._check_writable(key)
            self._items[self._key(key)] = cls
            return cls
        return decorator

    def create(self, key: str, **kwargs: Any) -> Any:
        """Create an instance of the registered class.

        Args:
            key: The key of the registered class.
            **kwargs: Arguments to pass to the class constructor.

        Returns:
            An instance of the registered class.

        Raises:
            KeyError: If the key is not registered.
        """
        if self._key(key) not in self._items:
            available = ", ".join(sorted(self._items.keys()))
            raise KeyError(
                f"{self._name}: unknown key '{key}'. "
                f"Available: {available}"
            )
        return self._items[self._key(key)](**kwargs)

    # ------------------------------------------------------------------
    # Data registration

    def add(self, key: str, item: Any) -> None:
        """Add a data item under ``key``.

        Raises:
            ValueError: If the key is already registered.
            RuntimeError: If the registry is frozen.
        """
        self._check_writable(key)
        self._items[self._key(key)] = item

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the item for ``key``, or ``default`` when absent."""
        return self._items.get(self._key(key), default)

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    # ------------------------------------------------------------------
    # Introspection

    def keys(self) -> List[str]:
        """Return a list of registered keys.

        Useful for populating argparse choices dynamically.
        """
        return list(self._items.keys())

    def __contains__(self, key: str) -> bool:
        """Check if a key is registered."""
        return self._key(key) in self._items

    def __len__(self) -> int:
        """Return the number of registered items."""
        return len(self._items)
