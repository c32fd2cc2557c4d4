from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (clrs package directory)
_CLRS_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _CLRS_DIR / 'prelude' / 'core.clrs'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return default
    return Path(raw)


def get_prelude_path() -> Path:
    p = path_from_env('CLRS_PRELUDE_PATH', _DEFAULT_PRELUDE)
    # a directory means "the core.clrs inside it"
    return p / 'core.clrs' if p.is_dir() else p
