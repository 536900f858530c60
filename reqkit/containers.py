"""Key/value containers that render as URL-encoded query or form content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar, Union

from reqkit.util import url_encode


@dataclass
class Parameter:
    """A query parameter."""

    key: str
    value: str


@dataclass
class Pair:
    """A form field."""

    key: str
    value: str


T = TypeVar("T", Parameter, Pair)


class CurlContainer(Generic[T]):
    """An ordered list of key/value items; tuples become item_type instances."""

    item_type: type = Pair

    def __init__(self, items: Iterable[Union[T, tuple[str, str]]] = (), encode: bool = True) -> None:
        self.encode = encode
        self._items: list[T] = []
        self.add(*items)

    def _as_item(self, item: Union[T, tuple[str, str]]) -> T:
        if isinstance(item, (Parameter, Pair)):
            return item  # type: ignore[return-value]
        if isinstance(item, tuple) and len(item) == 2:
            return self.item_type(*item)
        raise TypeError(f"expected a key/value item, got {item!r}")

    def add(self, *args: Union[T, tuple[str, str]]) -> None:
        """Append one or more items."""
        self._items.extend(self._as_item(item) for item in args)

    def get_content(self) -> str:
        """Join the items as key=value pairs with '&', URL-encoded when encode is set."""
        escape = url_encode if self.encode else (lambda s: s)
        return "&".join(f"{escape(i.key)}={escape(i.value)}" for i in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, encode={self.encode!r})"