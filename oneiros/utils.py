import functools
import logging
import time

from oneiros.config import LOG_LEVEL, oneiros_should_fail_on_error

LOGGING_FORMAT = "%(levelname)s | %(name)s | %(message)s"

def resolve_log_level(name):
    # getLevelName maps unknown names to a "Level %s" string instead of failing
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

logging.basicConfig(level=resolve_log_level(LOG_LEVEL), format=LOGGING_FORMAT)
log = logging.getLogger("oneiros")


class ThroughputMeter():
    def __init__(self):
        self.iterations = 0
        self.generated = 0
        self.start_time = time.perf_counter()

    def update(self, size):
        self.iterations += 1
        self.generated += size

    @property
    def elapsed(self):
        return time.perf_counter() - self.start_time

    @property
    def bytes_per_sec(self):
        elapsed = self.elapsed
        if elapsed <= 0:
            return 0.0
        return self.generated / elapsed

    def __repr__(self):
        return f"ThroughputMeter({self.iterations=}, {self.generated=}, {self.bytes_per_sec=:.0f})"

def exception_wrapper(exception_types=(Exception,), returnval=None):
    """Log `exception_types` and return `returnval`, unless ONEIROS_FAIL_EARLY is set."""
    def actual_exception_wrapper(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exception_types as e:
                if oneiros_should_fail_on_error():
                    raise
                log.error(f"{func.__qualname__} failed with {type(e).__name__}: {e}")
                return returnval
        return wrapper
    return actual_exception_wrapper
