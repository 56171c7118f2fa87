"""Path display helpers."""
import os


def make_relative(target_path: str, root_dir: str) -> str:
    """Express target_path relative to root_dir, ``.`` when they are equal."""
    relative = os.path.relpath(os.path.abspath(target_path), os.path.abspath(root_dir))
    return relative or "."


def relative_display_path(file_path: str, root_dir: str) -> str:
    """Path of a file as shown in results.

    Relative to root_dir when the file is inside it, otherwise the base name.
    """
    try:
        relative = os.path.relpath(file_path, root_dir)
    except ValueError:
        # different drives on Windows
        return os.path.basename(file_path)

    if relative == "." or relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return os.path.basename(file_path)
    return relative


def shorten_path(path: str, max_len: int = 35) -> str:
    """Shorten a path for display, keeping the first and last segments.

    Args:
        path: Path to shorten.
        max_len: Maximum length of the result.

    Returns:
        ``path`` unchanged if short enough, else ``head/.../tail``.
    """
    if len(path) <= max_len:
        return path

    parts = path.split(os.sep)
    head = parts[0]
    budget = max_len - len(head) - len(os.sep + "...")
    tail: list[str] = []
    for part in reversed(parts[1:]):
        if len(part) + len(os.sep) > budget:
            break
        tail.insert(0, part)
        budget -= len(part) + len(os.sep)

    if not tail or len(parts) < 3:
        return "..." + path[-(max_len - 3):]
    return os.sep.join([head, "...", *tail])
