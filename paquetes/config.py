"""Reading KEY=VALUE configuration files."""

from __future__ import annotations

from pathlib import Path


def parse_config(text: str) -> dict[str, str]:
    """Parse configuration text; '#' lines and lines without '=' are skipped."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key] = value
    return values


def load_config(path: str | Path) -> dict[str, str]:
    """Read and parse a configuration file."""
    return parse_config(Path(path).read_text(encoding="utf-8"))