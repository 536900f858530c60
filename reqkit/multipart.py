"""Files and parts of a multipart form upload."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

PathInput = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class File:
    """A file to upload, optionally sent under another file name."""

    filepath: str
    overridden_filename: str = ""

    def has_overridden_filename(self) -> bool:
        """Tell whether the file is sent under a name of its own."""
        return bool(self.overridden_filename)


class Files:
    """An ordered collection of files for one form field."""

    def __init__(self, files: File | PathInput | Iterable[File | PathInput] = ()) -> None:
        if isinstance(files, (File, str, os.PathLike)):
            files = [files]
        self._files = [self._as_file(f) for f in files]

    @staticmethod
    def _as_file(item: File | PathInput) -> File:
        if isinstance(item, File):
            return item
        if isinstance(item, (str, os.PathLike)):
            return File(os.fspath(item))
        raise TypeError(f"expected a File or a path, got {type(item).__name__}")

    def append(self, file: File | PathInput) -> None:
        """Add a file at the end."""
        self._files.append(self._as_file(file))

    def pop(self) -> File:
        """Remove and return the last file."""
        if not self._files:
            raise IndexError("pop from empty Files")
        return self._files.pop()

    def __iter__(self) -> Iterator[File]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Files):
            return NotImplemented
        return self._files == other._files

    def __repr__(self) -> str:
        return f"Files({self._files!r})"


class Part:
    """One field of a multipart form: a text value or one or more files."""

    __slots__ = ("name", "value", "content_type", "is_file", "files")

    def __init__(
        self, name: str, value: str | int | File | Files, content_type: str = ""
    ) -> None:
        self.name = name
        self.content_type = content_type
        self.is_file = False
        self.files = Files()
        if isinstance(value, File):
            value = Files(value)
        if isinstance(value, Files):
            self.is_file = True
            self.files = value
            self.value = ""
        elif isinstance(value, bool):
            raise TypeError("a part value cannot be a bool")
        elif isinstance(value, int):
            self.value = str(value)
        elif isinstance(value, str):
            self.value = value
        else:
            raise TypeError(f"unsupported part value: {type(value).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return all(getattr(self, s) == getattr(other, s) for s in self.__slots__)

    def __repr__(self) -> str:
        if self.is_file:
            return f"Part({self.name!r}, {self.files!r}, {self.content_type!r})"
        return f"Part({self.name!r}, {self.value!r}, {self.content_type!r})"


class Multipart:
    """The parts of a multipart form, in order."""

    def __init__(self, parts: Iterable[Part]) -> None:
        self.parts = list(parts)

    def __repr__(self) -> str:
        return f"Multipart({self.parts!r})"