"""No space left on device: size directories from a terminal transcript."""

from __future__ import annotations

from dataclasses import dataclass, field

_DISK_SIZE = 70_000_000
_UPDATE_SIZE = 30_000_000
_SMALL_LIMIT = 100_000

Path = tuple[str, ...]


@dataclass
class _Directory:
    files: dict[str, int] = field(default_factory=dict)
    subdirs: dict[str, "_Directory"] = field(default_factory=dict)

    def size(self) -> int:
        return sum(self.files.values()) + sum(d.size() for d in self.subdirs.values())


def _parse(text: str) -> dict[Path, _Directory]:
    directories: dict[Path, _Directory] = {}
    path: list[str] = []
    listing: _Directory | None = None
    for line in text.splitlines():
        if not line:
            continue
        words = line.split(" ")
        if words[0] == "$":
            listing = None
            command = words[1:]
            if len(command) >= 2 and command[0] == "cd":
                target = command[1]
                if target == "..":
                    if not path:
                        raise ValueError("cannot leave the top directory")
                    path.pop()
                else:
                    path.append(target)
                    directories.setdefault(tuple(path), _Directory())
            elif command[:1] == ["ls"]:
                if not path:
                    raise ValueError("ls outside of any directory")
                listing = directories[tuple(path)]
            else:
                raise ValueError(f"unknown command: {line!r}")
            continue
        if listing is None:
            raise ValueError(f"output outside of a listing: {line!r}")
        if len(words) < 2:
            raise ValueError(f"invalid listing entry: {line!r}")
        name = words[1]
        if words[0] == "dir":
            child = directories.setdefault((*path, name), _Directory())
            listing.subdirs[name] = child
        else:
            try:
                listing.files[name] = int(words[0])
            except ValueError as exc:
                raise ValueError(f"invalid file size: {line!r}") from exc
    return directories


def directory_sizes(text: str) -> dict[Path, int]:
    """Total size of every directory, keyed by path, in order of discovery."""
    return {path: directory.size() for path, directory in _parse(text).items()}


def part1(text: str) -> int:
    """Sum of the sizes of all directories of at most 100000."""
    return sum(size for size in directory_sizes(text).values() if size <= _SMALL_LIMIT)


def part2(text: str) -> int:
    """Size of the smallest directory whose removal frees enough space."""
    sizes = directory_sizes(text)
    if not sizes:
        raise ValueError("no directories found")
    used = next(iter(sizes.values()))
    if used > _DISK_SIZE:
        raise ValueError("filesystem holds more than the disk size")
    free = _DISK_SIZE - used
    if free > _UPDATE_SIZE:
        raise ValueError("there is already enough free space")
    needed = _UPDATE_SIZE - free
    return min(size for size in sizes.values() if size >= needed)