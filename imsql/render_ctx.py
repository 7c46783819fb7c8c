"""Render context tracking nesting depth, and components that trace themselves."""

from __future__ import annotations

import io
import sys
from typing import Optional, TextIO


class _NullStream(io.TextIOBase):
    def write(self, text: str) -> int:
        return len(text)


class RenderCtx:
    """Per-frame rendering state: nesting depth and whether this is the first paint."""

    def __init__(self, debug: bool = False, stream: Optional[TextIO] = None) -> None:
        self.render_depth = 0
        self.is_first_paint = True
        if stream is not None:
            self.dbg_stream: TextIO = stream
        elif debug:
            self.dbg_stream = sys.stderr
        else:
            self.dbg_stream = _NullStream()

    def enter(self) -> None:
        self.render_depth += 1

    def exit(self) -> None:
        if self.render_depth > 0:
            self.render_depth -= 1

    def render_cycle(self) -> None:
        """Mark the end of a frame; later frames are no longer the first paint."""
        self.is_first_paint = False


class Component:
    """A UI element scope that writes an indented open/close trace to the debug stream."""

    LABEL = "Component"

    def __init__(self, ctx: RenderCtx, label: Optional[str] = None) -> None:
        self.ctx = ctx
        self.label = label if label is not None else self.LABEL

    def _indent(self) -> str:
        return " " * (self.ctx.render_depth * 2)

    def __enter__(self) -> Component:
        self.ctx.dbg_stream.write(f"{self._indent()}<{self.label}>\n")
        self.ctx.enter()
        return self

    def __exit__(self, *args: object) -> None:
        self.ctx.exit()
        self.ctx.dbg_stream.write(f"{self._indent()}</{self.label}>\n")