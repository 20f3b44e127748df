"""Per-frame timing of named tasks."""

from __future__ import annotations

import time
from dataclasses import dataclass

MAX_TASKS = 20

_BRIGHT = (
    0x1ABC9CFF,  # turquoise
    0x2ECC71FF,  # emerald
    0x3498DBFF,  # peter river
    0x9B59B6FF,  # amethyst
    0xF1C40FFF,  # sun flower
    0xE67E22FF,  # carrot
    0xE74C3CFF,  # alizarin
    0xECF0F1FF,  # clouds
)

_DIM = (
    0x16A085FF,  # green sea
    0x27AE60FF,  # nephritis
    0x2980B9FF,  # belize hole
    0x8E44ADFF,  # wisteria
    0xF39C12FF,  # orange
    0xD35400FF,  # pumpkin
    0xC0392BFF,  # pomegranate
    0xBDC3C7FF,  # silver
)


def _rgba_le(color: int) -> int:
    """Reorder an 0xRRGGBBAA colour into little-endian byte order."""
    return int.from_bytes((color & 0xFFFFFFFF).to_bytes(4, "big"), "little")


def color_bright(index: int) -> int:
    """Bright palette colour for task ``index``, cycling every 8."""
    return _rgba_le(_BRIGHT[index % len(_BRIGHT)])


def color_dim(index: int) -> int:
    """Dim palette colour for task ``index``, cycling every 8."""
    return _rgba_le(_DIM[index % len(_DIM)])


@dataclass
class ProfilerTask:
    """A timed task within one frame; times are in seconds."""

    name: str
    color: int
    start_time: float = 0.0
    end_time: float = 0.0


class ScopedTask:
    """Measures time from creation until :meth:`end` or leaving a ``with`` block."""

    def __init__(self, manager: "ProfilerManager", index: int) -> None:
        self._manager = manager
        self.index = index
        self._start = time.perf_counter()
        self.ended = False

    def end(self) -> None:
        """Record the elapsed time; later calls do nothing."""
        if self.ended:
            return
        self.ended = True
        self._manager._end_task(self.index, time.perf_counter() - self._start)

    def __enter__(self) -> "ScopedTask":
        return self

    def __exit__(self, *args) -> None:
        self.end()


class ProfilerManager:
    """Collects the tasks timed during the current frame."""

    def __init__(self, frames_count: int) -> None:
        self.frames_count = frames_count
        self.tasks: list[ProfilerTask] = []

    def clear_tasks(self) -> None:
        """Forget this frame's tasks; call once per frame."""
        self.tasks.clear()

    def start_scoped_task(self, name: str, color: int = 0) -> ScopedTask:
        """Start timing ``name``; a zero colour picks one from the palette."""
        if len(self.tasks) >= MAX_TASKS:
            raise RuntimeError(f"at most {MAX_TASKS} tasks can be timed per frame")
        index = len(self.tasks)
        task_color = _rgba_le(color) if color else color_bright(index)
        self.tasks.append(ProfilerTask(name=name, color=task_color))
        return ScopedTask(self, index)

    def _end_task(self, index: int, duration: float) -> None:
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"no task with index {index}")
        self.tasks[index].end_time = duration