"""Recursive discovery of markdown sources"""

from pathlib import Path


MD_EXTENSIONS = ('.md', '.markdown')


def is_markdown(path: Path) -> bool:
    """True if the file name ends in .md or .markdown, case-insensitively."""
    return path.name.lower().endswith(MD_EXTENSIONS)


def discover_files(root: Path) -> list[Path]:
    """Return markdown files under root, depth-first with entries in name order.

    Directories are traversed but never returned. The caller checks that root exists.
    """
    files: list[Path] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            files.extend(discover_files(entry))
        elif is_markdown(entry):
            files.append(entry)
    return files
