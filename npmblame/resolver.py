"""Map paths inside a dependency tree to the package that owns them."""

from __future__ import annotations

NODE_MODULES = "node_modules"
BIN_DIRECTORY = ".bin"


def containing_directory(path: str) -> str:
    """Return the slash-separated parent of ``path`` ("" for a bare name)."""
    index = path.rfind("/")
    if index == -1:
        return ""
    if index == 0:
        return "/"
    return path[:index]


def resolve_owner(directory: str) -> str:
    """Return the package owning ``directory``.

    The segment after the last ``node_modules`` wins, so a dependency nested
    inside another package's own ``node_modules`` is attributed to itself and
    not to the top-level package. Without a marker the path is assumed to be
    rooted at a package: the first segment is the owner, or the second one
    when the path starts with a separator.
    """
    segments = directory.split("/")

    for index in range(len(segments) - 1, -1, -1):
        if segments[index] == NODE_MODULES:
            if index + 1 < len(segments):
                return segments[index + 1]
            break

    if segments[0]:
        return segments[0]
    if len(segments) > 1:
        return segments[1]
    return ""


__all__ = ["BIN_DIRECTORY", "NODE_MODULES", "containing_directory", "resolve_owner"]
