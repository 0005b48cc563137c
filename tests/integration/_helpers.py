from pathlib import Path
from typing import List

EXAMPLES_DIR = Path(__file__).resolve().parents[2] / "examples"


def example_module(name: str = "basic") -> Path:
    path = EXAMPLES_DIR / name
    if not path.is_dir():
        raise FileNotFoundError(f"Example module {name!r} not found under {EXAMPLES_DIR}")
    return path


def table_rows(readme: str, heading: str) -> List[List[str]]:
    """Return the body cells of the first table after ``heading``."""
    section = readme.split(heading, 1)[1].split("\n## ", 1)[0]
    lines = [ln for ln in section.splitlines() if ln.startswith("|")]
    return [[c.strip() for c in ln.strip().strip("|").split("|")] for ln in lines[2:]]
