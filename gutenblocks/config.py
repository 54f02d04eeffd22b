from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from . import storage
from .utils import truthy


@dataclass
class ConverterConfig:
    block_namespace: str = "core"
    parser: str = "html.parser"
    client_ids: bool = False
    client_id_prefix: str = "gutenberg-block"
    json_indent: int = 2
    logs_dir: str = ""


_ENV_VARS = {
    "block_namespace": "GUTENBLOCKS_NAMESPACE",
    "parser": "GUTENBLOCKS_PARSER",
    "client_ids": "GUTENBLOCKS_CLIENT_IDS",
    "client_id_prefix": "GUTENBLOCKS_CLIENT_ID_PREFIX",
    "json_indent": "GUTENBLOCKS_JSON_INDENT",
    "logs_dir": "GUTENBLOCKS_LOGS_DIR",
}


def _coerce(name: str, value: Any) -> Any:
    if name == "client_ids":
        return value if isinstance(value, bool) else truthy(value)
    if name == "json_indent":
        return int(value)
    return str(value)


def config_from_dict(data: Dict[str, Any]) -> ConverterConfig:
    if not isinstance(data, dict):
        raise ValueError("The converter section must be a JSON object.")
    known = {f.name for f in fields(ConverterConfig)}
    extra = set(data) - known
    if extra:
        raise ValueError(f"Unknown converter settings: {', '.join(sorted(extra))}")
    return ConverterConfig(**{k: _coerce(k, v) for k, v in data.items()})


def load_config(path: Optional[str | Path] = None) -> ConverterConfig:
    """
    Build the converter settings.

    Reads the ``converter`` section of a JSON config file when ``path`` is
    given, then applies ``GUTENBLOCKS_*`` environment variables on top (call
    ``load_dotenv()`` first to pick them up from a ``.env`` file).
    """
    cfg = ConverterConfig()
    if path:
        data = storage.read_json(path)
        cfg = config_from_dict(data.get("converter", {}) if isinstance(data, dict) else data)

    overrides: Dict[str, Any] = {}
    for name, env_var in _ENV_VARS.items():
        raw = os.getenv(env_var)
        if raw is not None and raw != "":
            overrides[name] = _coerce(name, raw)
    if overrides:
        cfg = replace(cfg, **overrides)
    return cfg
