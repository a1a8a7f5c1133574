"""Helpers for normalising and splitting paths inside a simulated file system."""


def remove_trailing_slashes(path: str) -> str:
    """Return the path without trailing slashes, keeping a lone "/"."""
    stripped = path.rstrip("/")
    if not stripped and path:
        return path[0]
    return stripped


def simplify_path_string(path: str) -> str:
    """Normalise a path that is absolute or relative to "/".

    Redundant slashes are removed, "." components dropped and ".."
    components resolved; ".." never climbs above the root.
    """
    parts: list[str] = []
    for component in path.split("/"):
        if component in ("", "."):
            continue
        if component == "..":
            if parts:
                parts.pop()
            continue
        parts.append(component)
    return remove_trailing_slashes("/" + "/".join(parts))


def split_path(path: str) -> tuple[str, str]:
    """Split a path into its directory part and its file part.

    A path without a slash has an empty directory part; a file directly
    under the root has "/" as its directory part.
    """
    last_slash = path.rfind("/")
    if last_slash == -1:
        return "", path
    directory = path[:last_slash] or "/"
    return directory, path[last_slash + 1:]


def is_at_mount_point(simplified_absolute_path: str, mount_point: str) -> bool:
    """Tell whether a simplified absolute path starts with the mount point."""
    return simplified_absolute_path.startswith(mount_point)


def path_at_mount_point(simplified_absolute_path: str, mount_point: str) -> str:
    """Return the part of a simplified absolute path below the mount point.

    Raises ValueError when the path is not at that mount point.
    """
    if not simplified_absolute_path.startswith(mount_point):
        raise ValueError("Path not found at mount point")
    return simplified_absolute_path[len(mount_point):]