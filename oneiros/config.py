import os

START_RULE = "<start>"

# derivations stop as soon as the output grows past this many bytes
MAX_OUTPUT_SIZE = 1024 * 1024

# the driver reports throughput every REPORT_EVERY derivations
REPORT_EVERY = 0x10000

LOG_LEVEL = os.environ.get("ONEIROS_LOG_LEVEL", "INFO").upper()


TRUE_VALUES = ("true", "1", "yes", "y")
FALSE_VALUES = ("false", "0", "no", "n", "")


def is_true_value(value):
    """Parse an environment flag, unset counts as false."""
    normalized = (value or "").strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value for boolean conversion: {value}")

def oneiros_should_fail_on_error():
    return is_true_value(os.environ.get("ONEIROS_FAIL_EARLY", None))
