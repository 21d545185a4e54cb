"""Timestamped, optionally throttled flow logging for layout diagnostics."""

import time

try:
    from utils.settings import settings
except ModuleNotFoundError:
    from cardstack.utils.settings import settings

_flow_log_last = {}


def flow_logs_enabled() -> bool:
    try:
        return bool(settings.value('flow_logs', False, type=bool))
    except Exception:
        return False


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None):
    """Print a `[time][TRACE][COMPONENT][LEVEL] message` line.

    Nothing is printed unless the `flow_logs` setting is on. With both
    `throttle_key` and `every_s` given, repeats of the same key within
    `every_s` seconds are dropped.
    """
    if not flow_logs_enabled():
        return
    now = time.time()
    if throttle_key and every_s is not None:
        last = _flow_log_last.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return
        _flow_log_last[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    print(f"[{ts}][TRACE][{component}][{level}] {message}")
