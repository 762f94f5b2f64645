"""Key-help texts rendered by the detail pane.

Each entry names an action and the keys currently bound to it, grouped the
way the help rows are displayed.
"""

from __future__ import annotations

from dataclasses import dataclass

from .input.key_config import KeyConfig, key_display_name

CMD_GROUP_GENERAL = "-- General --"
CMD_GROUP_INBOX = "-- Inbox --"


@dataclass(frozen=True, order=True)
class CommandText:
    name: str
    group: str


def _keys(keys: tuple[str, ...]) -> str:
    return ",".join(key_display_name(key) for key in keys)


def scroll(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Scroll up/down [{_keys(key_config.scroll_up)} / {_keys(key_config.scroll_down)}]",
        CMD_GROUP_GENERAL,
    )


def quit_app(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Quit [{_keys(key_config.quit + key_config.exit)}]",
        CMD_GROUP_GENERAL,
    )


def move_focus(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Move focus [Tab] search [/] detail [{_keys(key_config.focus_right)}/{_keys(key_config.focus_left)}]",
        CMD_GROUP_INBOX,
    )


def open_pdf(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Open [{_keys(key_config.enter)}] close [Esc]",
        CMD_GROUP_INBOX,
    )


def command_texts(key_config: KeyConfig) -> list[CommandText]:
    """All help entries in display order."""
    return [
        scroll(key_config),
        quit_app(key_config),
        move_focus(key_config),
        open_pdf(key_config),
    ]


def help_rows(key_config: KeyConfig) -> list[str]:
    """Flatten command texts into rows with a heading per group."""
    rows: list[str] = []
    current_group: str | None = None
    for command in command_texts(key_config):
        if command.group != current_group:
            current_group = command.group
            rows.append(current_group)
        rows.append(f"  {command.name}")
    return rows
