"""Logical key bindings and their physical key tokens."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

# Structural keys are hard-wired in the focus router and cannot be rebound.
STRUCTURAL_KEYS: frozenset[str] = frozenset({"TAB", "ESC", "/"})

_KEY_DISPLAY_NAMES: dict[str, str] = {
    "UP": "Up",
    "DOWN": "Down",
    "LEFT": "Left",
    "RIGHT": "Right",
    "ENTER": "Enter",
    "ESC": "Esc",
    "TAB": "Tab",
    "BACKSPACE": "Backspace",
    "CTRL_C": "Ctrl+C",
    "CTRL_U": "Ctrl+U",
    "HOME": "Home",
    "END": "End",
    "PAGE_UP": "PgUp",
    "PAGE_DOWN": "PgDn",
    "INSERT": "Ins",
    "DELETE": "Del",
}


def key_display_name(key: str) -> str:
    """Human-readable name for a key token, used in help rows."""
    return _KEY_DISPLAY_NAMES.get(key, key)


@dataclass(frozen=True)
class KeyConfig:
    """Physical keys bound to each logical action."""

    scroll_up: tuple[str, ...] = ("k", "UP")
    scroll_down: tuple[str, ...] = ("j", "DOWN")
    enter: tuple[str, ...] = ("ENTER",)
    exit: tuple[str, ...] = ("CTRL_C",)
    quit: tuple[str, ...] = ("q",)
    focus_left: tuple[str, ...] = ("LEFT",)
    focus_right: tuple[str, ...] = ("RIGHT",)

    @classmethod
    def action_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def matches(self, action: str, key: str) -> bool:
        return key in getattr(self, action)

    def is_termination_key(self, key: str) -> bool:
        return key in self.quit or key in self.exit

    def with_overrides(self, overrides: dict[str, object]) -> KeyConfig:
        """Return a copy with validated overrides applied.

        Unknown actions, non-string keys, and structural keys are ignored.
        """
        changes: dict[str, tuple[str, ...]] = {}
        known = set(self.action_names())
        for action, raw in overrides.items():
            if action not in known:
                continue
            if isinstance(raw, str):
                raw = [raw]
            if not isinstance(raw, (list, tuple)):
                continue
            keys = tuple(
                key for key in raw if isinstance(key, str) and key and key not in STRUCTURAL_KEYS
            )
            if keys:
                changes[action] = keys
        return replace(self, **changes) if changes else self


__all__ = ["KeyConfig", "STRUCTURAL_KEYS", "key_display_name"]
