"""Run logging for spinor marches.

Two sinks are provided: a single summary line per run on a standard
``logging`` logger, and a CSV file with one row per trajectory sample.

Invariants
- ``get_logger`` installs at most one handler per logger name.
- Summary lines list keys in sorted order with floats at 10 significant digits,
  so identical runs emit identical lines.
- CSV columns are fixed when the writer is created; every row must carry
  exactly those columns with finite values.
"""
from __future__ import annotations

import logging
import math
import os
from typing import Callable, Mapping, Optional, Sequence, Tuple

__all__ = ["get_logger", "format_metrics", "log_metrics", "csv_logger"]

_HANDLER_MARK = "_grdirac_handler"


def get_logger(name: str = "grdirac", level: int = logging.INFO) -> logging.Logger:
    """Return ``name``'s logger with one timestamped stream handler attached."""
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    logger.propagate = False
    if not any(getattr(h, _HANDLER_MARK, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        setattr(handler, _HANDLER_MARK, True)
        handler.setLevel(int(level))
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(handler)
    return logger


def _finite(value: object, label: str) -> float:
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{label} must be a real number, got {type(value).__name__}") from e
    if not math.isfinite(out):
        raise ValueError(f"{label} must be finite, got {out}")
    return out


def _check_keys(keys: Sequence[object], what: str) -> None:
    if len(keys) == 0:
        raise ValueError(f"{what} must not be empty")
    for k in keys:
        if not isinstance(k, str) or not k:
            raise ValueError(f"{what} must be non-empty strings, got {k!r}")


def format_metrics(metrics: Mapping[str, float], step: Optional[int] = None) -> str:
    """
    Render ``metrics`` as ``"metrics k1=v1 k2=v2 [step=n]"``.

    >>> format_metrics({"r_final": 12.0, "norm_final": 1.0}, step=40)
    'metrics norm_final=1 r_final=12 step=40'
    """
    if not isinstance(metrics, Mapping):
        raise ValueError("metrics must be a mapping of name -> value")
    keys = sorted(metrics.keys())
    _check_keys(keys, "metric names")
    line = "metrics " + " ".join(f"{k}={_finite(metrics[k], k):.10g}" for k in keys)
    if step is not None:
        if isinstance(step, bool) or int(step) != step or step < 0:
            raise ValueError(f"step must be a non-negative integer, got {step!r}")
        line += f" step={int(step)}"
    return line


def log_metrics(
    metrics: Mapping[str, float],
    step: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Emit ``format_metrics(metrics, step)`` at INFO on ``logger`` (default: package logger)."""
    line = format_metrics(metrics, step)
    (logger if logger is not None else get_logger()).info(line)


def csv_logger(path: str, columns: Sequence[str]) -> Callable[[Mapping[str, float]], None]:
    """
    Return a row writer appending to the CSV file at ``path``.

    The header is ``columns`` in the given order and is written only when the
    file is missing or empty. Rows with missing or extra keys are rejected
    before anything is written.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("path must be a non-empty string")
    cols: Tuple[str, ...] = tuple(columns)
    _check_keys(cols, "columns")
    if len(set(cols)) != len(cols):
        raise ValueError(f"columns must be unique, got {cols}")
    target = os.path.abspath(path)

    def _write(row: Mapping[str, float]) -> None:
        if not isinstance(row, Mapping):
            raise ValueError("row must be a mapping of column -> value")
        if set(row.keys()) != set(cols):
            missing = sorted(set(cols) - set(row.keys()))
            extra = sorted(set(row.keys()) - set(cols), key=str)
            raise ValueError(f"row columns do not match header; missing={missing} extra={extra}")
        cells = [f"{_finite(row[c], c):.10g}" for c in cols]
        fresh = not os.path.exists(target) or os.path.getsize(target) == 0
        with open(target, "a", encoding="utf-8") as fh:
            if fresh:
                fh.write(",".join(cols) + "\n")
            fh.write(",".join(cells) + "\n")

    return _write
