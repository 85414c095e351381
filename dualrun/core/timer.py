import time

from loguru import logger

from dualrun.datastructures.type_aliases import DurationSeconds


def format_elapsed(seconds: DurationSeconds) -> str:
    """Render a duration as e.g. ``"1 minute 3 seconds, 250 ms"``."""
    total_ms = max(0, int(round(seconds * 1000)))
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)

    parts = []
    for amount, unit in ((hours, "hour"), (minutes, "minute"), (secs, "second")):
        if amount:
            parts.append(f"{amount} {unit}{'s' if amount > 1 else ''}")
    hms = " ".join(parts)
    return f"{hms}, {millis} ms" if hms else f"{millis} ms"


class Timer:
    """Context manager recording wall clock time around an execution.

    Use as:
        with Timer("Local execution") as timer:
            run_body()
        print(timer.time)
    """

    def __init__(self, name: str = ""):
        if name:
            # pre-format named output so we don't need two format strings
            self.name = f"[{name}] "
        else:
            self.name = ""

        self.start = 0.0
        self.end = 0.0
        self.interval: DurationSeconds = 0.0

    def __enter__(self):
        # Note: perf_counter keeps counting while we block on the body,
        #       which is what we want to report
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.end = time.perf_counter()
        self.interval = self.end - self.start

        # depth=1 so the caller's module/line is shown instead of the timer's
        logger.opt(depth=1).debug("{}Duration: {:,.4f}", self.name, self.interval)

    @property
    def time(self) -> str:
        """Formatted elapsed time of the last measured block."""
        return format_elapsed(self.interval)
