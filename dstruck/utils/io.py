"""I/O utilities with atomic writes."""

import shutil
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in the same directory keeps the move on one filesystem
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        shutil.move(str(tmp_path), str(path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_lines(path: Path, lines: Iterator[str]) -> int:
    """
    Write text lines atomically as UTF-8.

    Args:
        path: Destination path
        lines: Lines including their line endings

    Returns:
        Number of lines written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line)
                count += 1

    atomic_write(path, _write)
    return count


def read_lines(path: Path) -> Iterator[str]:
    """
    Read a UTF-8 text file line by line, keeping line endings.

    Args:
        path: Path to text file

    Yields:
        Lines
    """
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        yield from f
