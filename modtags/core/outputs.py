"""
Workflow output file writer (name=value lines appended to $GITHUB_OUTPUT).
"""

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .config import get_output_file


def _single_line(value: str) -> str:
    return " ".join(str(value).splitlines())


def write_outputs(outputs: Iterable[Tuple[str, str]], path: Union[Path, str, None] = None) -> bool:
    """Append outputs to the workflow output file.

    Falls back to $GITHUB_OUTPUT when ``path`` is not given; returns False
    when no output file is configured.
    """
    target = path or get_output_file()
    if not target:
        return False

    with open(target, "a", encoding="utf-8") as fh:
        for name, value in outputs:
            fh.write(f"{name}={_single_line(value)}\n")
    return True
