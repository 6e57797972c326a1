"""Logger naming for the package.

Every module obtains its logger through ``get_logger(__name__)`` so the whole
hierarchy hangs off the ``perfmetrics`` logger and can be configured in one
place by :func:`perfmetrics.logging_conf.setup_logging`.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "perfmetrics"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for ``name`` under the ``perfmetrics`` hierarchy.

    ``None`` gives the package logger itself; names from outside the package
    (``"scripts.report"``) are nested under it as ``perfmetrics.scripts.report``.
    """

    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


__all__ = ["ROOT_LOGGER", "get_logger"]
