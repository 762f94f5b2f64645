"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, list rows, the modal, and the
status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    border_focused: str
    title: str
    title_focused: str
    row_selected: str
    row_selected_unfocused: str
    row_default: str
    scrollbar: str
    search_query: str
    search_placeholder: str
    detail_heading: str
    detail_text: str
    modal_border: str
    modal_title: str
    notice: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    border_focused="\033[38;5;120m",
    title="\033[38;5;250m",
    title_focused="\033[1;38;5;120m",
    row_selected="\033[1;30;43m",
    row_selected_unfocused="\033[38;5;229m",
    row_default="\033[38;5;252m",
    scrollbar="\033[38;5;240m",
    search_query="\033[1;38;5;81m",
    search_placeholder="\033[2;38;5;250m",
    detail_heading="\033[1;38;5;81m",
    detail_text="\033[38;5;250m",
    modal_border="\033[38;5;45m",
    modal_title="\033[1;38;5;45m",
    notice="\033[38;5;214m",
    status="\033[7m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    border_focused="\033[38;5;45m",
    title="\033[38;5;110m",
    title_focused="\033[1;38;5;45m",
    row_selected="\033[1;38;5;16;48;5;45m",
    row_selected_unfocused="\033[38;5;153m",
    row_default="\033[38;5;252m",
    scrollbar="\033[38;5;24m",
    search_query="\033[1;38;5;45m",
    search_placeholder="\033[2;38;5;110m",
    detail_heading="\033[1;38;5;45m",
    detail_text="\033[38;5;153m",
    modal_border="\033[38;5;39m",
    modal_title="\033[1;38;5;39m",
    notice="\033[38;5;215m",
    status="\033[7m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    border="",
    border_focused="",
    title="",
    title_focused="",
    row_selected="\033[7m",
    row_selected_unfocused="",
    row_default="",
    scrollbar="",
    search_query="",
    search_placeholder="",
    detail_heading="",
    detail_text="",
    modal_border="",
    modal_title="",
    notice="",
    status="\033[7m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
