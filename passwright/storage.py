import os
from typing import List


def atomic_write_text(path: str, text: str) -> None:
    """
    Atomically write UTF-8 text to 'path' by writing to a temp file and renaming.
    Missing parent directories are created.
    """
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)

def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()

def read_text_lines(path: str) -> List[str]:
    """
    Read a UTF-8 word list as lines with endings stripped ('\\n' or '\\r\\n').
    """
    return read_text(path).splitlines()
