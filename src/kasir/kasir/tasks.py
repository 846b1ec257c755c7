"""Background tasks with explicit join handles."""

import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any


def spawn(fn: Callable[..., Any], *args: Any, name: str) -> Future:
    """Run ``fn(*args)`` on a daemon thread and return its Future.

    ``result()`` on the future is the join barrier and re-raises whatever
    ``fn`` raised. Daemon threads let Ctrl+C end the program even while a
    task is blocked reading stdin.
    """
    future: Future = Future()

    def run() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(fn(*args))
        except BaseException as exc:
            future.set_exception(exc)

    threading.Thread(target=run, name=name, daemon=True).start()
    return future
