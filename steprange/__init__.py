from importlib.resources import files

from .mathx import as_number, get_precision, modulo, normalize_step, to_fixed
from .range import Range
from .util import DEFAULT_PRECISION, DEFAULT_STEP, MAX_LENGTH, MAX_PRECISION

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Range",
    "get_precision",
    "modulo",
    "to_fixed",
    "as_number",
    "normalize_step",
    "DEFAULT_STEP",
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    "MAX_LENGTH",
    "docs",
]
