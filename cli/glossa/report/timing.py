import time
from typing import Callable


class TimedRun:
    def __init__(self, action: Callable[[], None]):
        self.action = action

    def runtime(self) -> float:
        """Run the action once and return the elapsed wall clock seconds."""
        start = time.perf_counter()
        self.action()
        return time.perf_counter() - start

    def seconds(self) -> int:
        return int(self.runtime())
