from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml

from .input_handling import DEFAULT_INPUT_FOLDER

ENV_PREFIX = "AOC2021_"

PATH_KEYS = ("input_dir", "log_file", "out_report", "summary_csv")


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML config must be a mapping")
        return data
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON config must be a mapping")
        return data
    raise ValueError(f"Unsupported config extension: {suffix}")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_int_list(value: str) -> list[int]:
    return [int(item) for item in value.split(",") if item.strip()]


def _coerce_int_list(key: str, value: Any) -> list[int]:
    """Accept a list of integers or a single integer from any config source."""
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple)) else [value]
    result: list[int] = []
    for item in items:
        if isinstance(item, bool) or not isinstance(item, (int, str)):
            raise ValueError(f"{key} must be a list of integers")
        try:
            result.append(int(item))
        except ValueError as exc:
            raise ValueError(f"{key} must be a list of integers") from exc
    return result


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map ENV variables with AOC2021_ prefix to config keys.

    Unknown variables are ignored.
    """
    mapping: Dict[str, str] = {
        f"{ENV_PREFIX}INPUT_DIR": "input_dir",
        f"{ENV_PREFIX}DAYS": "days",
        f"{ENV_PREFIX}PARTS": "parts",
        f"{ENV_PREFIX}STRICT": "strict",
        f"{ENV_PREFIX}COLORS": "colors",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FORMAT": "log_format",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
        f"{ENV_PREFIX}OUT_REPORT": "out_report",
        f"{ENV_PREFIX}SUMMARY_CSV": "summary_csv",
    }

    result: Dict[str, Any] = {}
    for env_key, cfg_key in mapping.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if cfg_key in {"days", "parts"}:
            try:
                result[cfg_key] = _parse_int_list(raw)
            except ValueError as exc:
                raise ValueError(f"{env_key} must be a comma separated list of integers") from exc
        elif cfg_key == "strict":
            result[cfg_key] = _parse_bool(raw)
        else:
            result[cfg_key] = raw
    return result


def _apply_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = json.loads(json.dumps(base))  # deep copy via JSON
    merged.update(overrides)
    return merged


def canonical_json_dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=True, sort_keys=True, separators=(",", ":"))


def compute_params_hash(resolved: Mapping[str, Any]) -> str:
    """Hash the run contract: which inputs are solved, not how they are reported."""
    contract: Dict[str, Any] = {}
    if "input_dir" in resolved:
        contract["input_dir"] = str(resolved["input_dir"])
    for key in ("days", "parts"):
        values = resolved.get(key) or []
        contract[key] = sorted(set(int(v) for v in values))
    digest = hashlib.sha256(canonical_json_dumps(contract).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    cli_overrides: Mapping[str, Any],
) -> Dict[str, Any]:
    """Normalize paths per policy.

    - Paths from config file: resolve relative to config directory
    - Paths from CLI: resolve relative to CWD
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None

    def normalize(path_value: str, is_cli: bool) -> str | None:
        if path_value == "":
            return None
        p = Path(path_value)
        if p.is_absolute():
            return str(p)
        base = cwd if is_cli else (cfg_dir or cwd)
        return str((base / p).resolve())

    result = dict(resolved)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if value is None:
            continue
        result[key] = normalize(str(value), key in cli_overrides)
    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Dict[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], str, Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Returns (resolved_params, params_hash, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path) if config_path else {}
    env_map = _collect_env_vars(os.environ if env is None else env)

    defaults: Dict[str, Any] = {
        "input_dir": DEFAULT_INPUT_FOLDER,
        "days": [],
        "parts": [],
        "strict": False,
        "colors": "auto",
        "log_level": "INFO",
        "log_format": "text",
    }

    merged = _apply_overrides(defaults, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)

    for key in ("days", "parts"):
        merged[key] = _coerce_int_list(key, merged.get(key))
    if not merged.get("input_dir"):
        merged["input_dir"] = DEFAULT_INPUT_FOLDER

    merged = resolve_paths(merged, config_path, cli_overrides)

    params_hash = compute_params_hash(merged)
    return merged, params_hash, config_path
