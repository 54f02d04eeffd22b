from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd


def _ensure_exists(path: Path) -> Path:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    p = _ensure_exists(Path(path))
    return p.read_text(encoding=encoding)


def write_text(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding=encoding)


def read_json(path: str | Path) -> Any:
    p = _ensure_exists(Path(path))
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)


def dumps_json(obj: Any, indent: int = 2) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=indent)


def write_json(path: str | Path, obj: Any, indent: int = 2) -> None:
    write_text(path, dumps_json(obj, indent=indent))


def write_blocks_csv(path: str | Path, blocks: List[Dict[str, Any]]) -> None:
    """One row per block for review in a spreadsheet; attrs are kept as JSON text."""
    rows = [
        {
            "index": i,
            "blockName": b.get("blockName", ""),
            "innerHTML": b.get("innerHTML", ""),
            "attrs": json.dumps(b.get("attrs", {}), ensure_ascii=False),
        }
        for i, b in enumerate(blocks)
    ]
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(rows, columns=["index", "blockName", "innerHTML", "attrs"])
    df.to_csv(p, index=False, encoding="utf-8")
