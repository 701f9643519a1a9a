"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (tree rows, pickers, notifications). Syntax
highlighting style for commit patches remains a separate Pygments setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    dim: str
    reset: str
    tree_marker: str
    results_label: str
    commit_sha: str
    commit_subject: str
    commit_meta: str
    show_all: str
    message: str
    branch_current: str
    branch_remote: str
    picker_index: str
    picker_prompt: str
    notify_info: str
    notify_warning: str
    notify_error: str


DEFAULT_THEME = UITheme(
    name="default",
    dim="\033[2m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    results_label="\033[1;34m",
    commit_sha="\033[38;5;214m",
    commit_subject="\033[38;5;252m",
    commit_meta="\033[2;38;5;250m",
    show_all="\033[38;5;81m",
    message="\033[2;38;5;250m",
    branch_current="\033[1;38;5;42m",
    branch_remote="\033[38;5;110m",
    picker_index="\033[38;5;229m",
    picker_prompt="\033[1;38;5;81m",
    notify_info="\033[38;5;81m",
    notify_warning="\033[38;5;214m",
    notify_error="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    dim="\033[2;38;5;31m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    results_label="\033[1;38;5;45m",
    commit_sha="\033[38;5;117m",
    commit_subject="\033[38;5;252m",
    commit_meta="\033[2;38;5;110m",
    show_all="\033[38;5;45m",
    message="\033[2;38;5;110m",
    branch_current="\033[1;38;5;45m",
    branch_remote="\033[38;5;73m",
    picker_index="\033[38;5;153m",
    picker_prompt="\033[1;38;5;45m",
    notify_info="\033[38;5;45m",
    notify_warning="\033[38;5;221m",
    notify_error="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    dim="",
    reset="",
    tree_marker="",
    results_label="",
    commit_sha="",
    commit_subject="",
    commit_meta="",
    show_all="",
    message="",
    branch_current="",
    branch_remote="",
    picker_index="",
    picker_prompt="",
    notify_info="",
    notify_warning="",
    notify_error="",
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


def paint(theme_color: str, text: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``theme_color`` unless the theme is colorless."""
    if not theme_color:
        return text
    return f"{theme_color}{text}{theme.reset}"


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "paint",
]
