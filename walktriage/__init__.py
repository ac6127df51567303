"""Public package surface for walktriage.

Exports ``main`` for programmatic CLI invocation and ``run`` for embedding
the walk driver. Most implementation lives in submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def run(*args, **kwargs):
    """Lazily import the walk driver."""
    from .walk import run as _run

    return _run(*args, **kwargs)


__all__ = ["main", "run"]
