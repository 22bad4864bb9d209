from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

DEFAULT_DEMO_MESSAGES = (
    "CQ AR DE K",
    "AR SK",
    "HELLO @ WORLD",
    "HELLO ~ WORLD",
)


@dataclass
class ConsoleConfig:
    demo_messages: List[str] = field(default_factory=lambda: list(DEFAULT_DEMO_MESSAGES))
    word_by_word: bool = False
    show_full: bool = True
    stop_on_error: bool = True


@dataclass
class AppConfig:
    console: ConsoleConfig = field(default_factory=ConsoleConfig)


def load_config(path: str | Path) -> AppConfig:
    p = Path(path)
    if not p.exists():
        cfg = AppConfig()
        save_config(p, cfg)
        return cfg

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raw = {}
    console_raw = raw.get("console")
    if not isinstance(console_raw, dict):
        console_raw = {}
    cfg = AppConfig()
    _apply_dataclass_updates(cfg.console, console_raw)

    messages = cfg.console.demo_messages
    if messages is None:
        messages = []
    elif isinstance(messages, str):
        messages = [messages]
    cfg.console.demo_messages = [str(m) for m in messages]
    cfg.console.word_by_word = bool(cfg.console.word_by_word)
    cfg.console.show_full = bool(cfg.console.show_full)
    cfg.console.stop_on_error = bool(cfg.console.stop_on_error)

    return cfg


def save_config(path: str | Path, config: AppConfig) -> None:
    payload = {
        "console": asdict(config.console),
    }
    p = Path(path)
    p.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), encoding="utf-8")


def _apply_dataclass_updates(target: Any, updates: Dict[str, Any]) -> None:
    for key, value in updates.items():
        if hasattr(target, key):
            setattr(target, key, value)
