from __future__ import annotations

import hashlib
import logging
import re
from pathlib import Path
from typing import Optional


_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def setup_logger(log_dir: str | Path = "", name: str = "gutenblocks") -> logging.Logger:
    """Create a console logger, plus a file handler when ``log_dir`` is set.

    Console output goes to stderr so that JSON written to stdout stays clean.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Avoid adding multiple handlers (e.g., repeated main() calls in tests)
    if logger.handlers:
        return logger

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "gutenblocks.log", encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger


def sha1_text(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of an attribute value.

    "100" -> 100, " 640px" -> 640, "auto" -> None, None -> None.
    """
    if value is None:
        return None
    m = _LEADING_INT_PATTERN.match(str(value))
    if not m:
        return None
    return int(m.group(1))


def truthy(value: Optional[str]) -> bool:
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")
