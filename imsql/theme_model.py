"""Colour theme for the node designer."""

from __future__ import annotations

from dataclasses import dataclass, field

from imsql.base_types import Color


@dataclass(frozen=True)
class TitleBarTheme:
    """Title bar colours for one kind of node."""

    default: Color
    selected: Color
    hover: Color


def _database_title_bar() -> TitleBarTheme:
    return TitleBarTheme(
        default=Color.from_hex("#2b4f82"),
        selected=Color.from_hex("#3369ad"),
        hover=Color.from_hex("#397ccd"),
    )


def _operator_title_bar() -> TitleBarTheme:
    return TitleBarTheme(
        default=Color.from_hex("#ee8434"),
        selected=Color.from_hex("#f99253"),
        hover=Color.from_hex("#ffa46b"),
    )


def _spreadsheet_title_bar() -> TitleBarTheme:
    return TitleBarTheme(
        default=Color.from_hex("#1D6F42"),
        selected=Color.from_hex("#227a49"),
        hover=Color.from_hex("#29a561"),
    )


@dataclass(frozen=True)
class NodeThemes:
    """Title bar themes for each node kind."""

    database: TitleBarTheme = field(default_factory=_database_title_bar)
    operator: TitleBarTheme = field(default_factory=_operator_title_bar)
    spreadsheet: TitleBarTheme = field(default_factory=_spreadsheet_title_bar)


@dataclass(frozen=True)
class ThemeModel:
    """The application's colour theme."""

    nodes: NodeThemes = field(default_factory=NodeThemes)