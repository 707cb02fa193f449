"""Scene rendering: draws a fixed set of primitives into a command encoder."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Iterable
from typing import Any, NamedTuple

import numpy as np

from shapeforms.primitive import DrawCall, Primitive, Quad

__all__ = ["RecordingEncoder", "FrameTimer", "Renderer", "build_scene", "main"]

CLEAR_COLOR = (4.0, 2.0, 5.0, 1.0)
WINDOW_SIZE = (600, 600)
WINDOW_TITLE = "Abstract Window"


class RecordingEncoder:
    """A render command encoder that records every command it receives.

    Each entry of ``commands`` is a tuple whose first item names the command.
    """

    def __init__(self) -> None:
        self.commands: list[tuple[Any, ...]] = []

    def set_pipeline(self, name: str) -> None:
        """Record binding of the named render pipeline."""
        self.commands.append(("pipeline", name))

    def set_vertex_buffer(self, data: np.ndarray, index: int) -> None:
        """Record binding of a vertex buffer at ``index``."""
        self.commands.append(("vertex_buffer", index, np.array(data, copy=True)))

    def set_vertex_bytes(self, data: bytes, index: int) -> None:
        """Record raw bytes bound at ``index``."""
        self.commands.append(("vertex_bytes", index, bytes(data)))

    def draw_indexed(self, primitive_type: str, index_count: int, indices: np.ndarray) -> None:
        """Record an indexed draw of ``index_count`` indices."""
        used = tuple(int(i) for i in np.asarray(indices)[:index_count])
        self.commands.append(("draw_indexed", primitive_type, index_count, used))

    @property
    def draw_count(self) -> int:
        """Number of draw commands recorded so far."""
        return sum(1 for command in self.commands if command[0] == "draw_indexed")


class _Tick(NamedTuple):
    delta: float
    fps: int | None


class FrameTimer:
    """Measures frame times and counts frames per elapsed second."""

    def __init__(self, start: float | None = None) -> None:
        self.previous = time.perf_counter() if start is None else float(start)
        self.total_time = 0.0
        self.last_reported_second = -1
        self.frames = 0

    def tick(self, now: float | None = None) -> _Tick:
        """Register a frame at time ``now`` (seconds).

        Returns the time since the previous frame and, when a new whole
        second of total time has been reached, the number of frames counted
        since the last report; otherwise ``fps`` is None.
        """
        current = time.perf_counter() if now is None else float(now)
        delta = current - self.previous
        self.previous = current
        self.frames += 1
        self.total_time += delta

        current_second = int(self.total_time)
        if current_second > self.last_reported_second:
            fps = self.frames
            self.last_reported_second = current_second
            self.frames = 0
            return _Tick(delta, fps)
        return _Tick(delta, None)


def build_scene() -> list[Primitive]:
    """Build the default scene: a grey quad and a rotated, half-sized red quad."""
    positions = [
        (-0.75, 0.75, 0.0, 1.0),
        (0.0, 0.75, 0.0, 1.0),
        (0.0, 0.0, 0.0, 1.0),
        (-0.75, 0.0, 0.0, 1.0),
    ]
    gray = [(0.5, 0.5, 0.5, 1.0)] * 4
    red = [(1.0, 0.0, 0.0, 1.0)] * 4

    first = Quad(positions, gray)
    second = Quad(positions, red)
    second.transform.set_rotation(-math.pi, 0, 0, 1)
    second.transform.set_scale(0.5, 0.5, 0)
    return [first, second]


class Renderer:
    """Renders an ordered collection of primitives, one frame at a time."""

    def __init__(self, primitives: Iterable[Primitive] | None = None) -> None:
        self.primitives = list(build_scene() if primitives is None else primitives)
        self.clear_color = CLEAR_COLOR

    def render_frame(self, encoder: Any) -> list[DrawCall]:
        """Encode and draw every primitive in order; return the draws issued."""
        calls = []
        for primitive in self.primitives:
            primitive.encode_render_commands(encoder)
            calls.append(primitive.draw(encoder))
        return calls


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: list[str] | None = None) -> int:
    """Render the default scene for a number of frames and report the draws."""
    parser = argparse.ArgumentParser(prog="shapeforms", description="Render the default scene.")
    parser.add_argument("--frames", type=_positive_int, default=1, help="number of frames to render")
    parser.add_argument("--log-fps", action="store_true", help="report frame timing")
    args = parser.parse_args(argv)

    renderer = Renderer()
    timer = FrameTimer() if args.log_fps else None

    for frame in range(args.frames):
        if timer is not None:
            tick = timer.tick()
            print(f"Delta Time: {tick.delta} seconds")
            if tick.fps is not None:
                print(f"Total Time: {timer.last_reported_second} seconds")
                print(f"FPS: {tick.fps}")
        encoder = RecordingEncoder()
        calls = renderer.render_frame(encoder)
        indices = sum(call.index_count for call in calls)
        print(f"frame {frame}: {len(calls)} draws, {indices} indices")
    return 0