"""Populate a global environment: host functions first, then a bootstrap script."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from clrs.builtin.env_builtin import register
from clrs.config import get_prelude_path
from clrs.errors import ClrsError, ClrsBootstrapError
from clrs.evaluation.evaluator import evaluate
from clrs.reader.parser import read
from clrs.types.environment import Environment

logger = logging.getLogger(__name__)


def bootstrap(source: str, env: Optional[Environment] = None) -> Environment:
    """Register the host function table into `env`, then evaluate `source` in it.

    Any failure raises ClrsBootstrapError; the environment must then be
    discarded rather than used half-initialized.
    """
    if env is None:
        env = Environment()
    register(env)
    logger.info("Bootstrapping global environment")
    try:
        for expr in read(source):
            evaluate(expr, env)
    except (ClrsError, RecursionError) as e:
        raise ClrsBootstrapError(f"Problem loading bootstrap script: {e}") from e
    logger.info("Bootstrap complete, %d global bindings", len(env.vars))
    return env


def load_prelude(
    env: Optional[Environment] = None, path: Optional[Path] = None
) -> Environment:
    """Bootstrap `env` from the prelude file (CLRS_PRELUDE_PATH or the packaged core.clrs)."""
    p = Path(path) if path is not None else get_prelude_path()
    try:
        source = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ClrsBootstrapError(f"Cannot read bootstrap script {p}") from e
    logger.debug("Loading prelude from %s", p)
    return bootstrap(source, env)
