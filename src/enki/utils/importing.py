"""Resolution of ``module:attribute`` targets."""
from __future__ import annotations

import importlib
from typing import Any


def resolve_target(path: str) -> Any:
    """Import the object named by ``path``.

    Accepts ``package.module:Name`` (``Name`` may itself be dotted, e.g.
    ``module:Outer.Inner``) or the plain dotted form ``package.module.Name``.
    """

    text = path.strip() if path else ""
    if not text:
        raise ValueError("Empty target provided")
    module_name, sep, qualname = text.partition(":")
    if not sep:
        module_name, _, qualname = text.rpartition(".")
    if not module_name or not qualname:
        raise ValueError(f"Invalid target '{path}', expected 'module:attribute'")
    target: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise AttributeError(f"'{module_name}' has no attribute '{qualname}'") from exc
    return target
