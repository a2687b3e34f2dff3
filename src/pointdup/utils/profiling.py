"""Optional cProfile instrumentation.

Setting POINTDUP_PROFILE to a directory makes the command line entry point and every
worker-side file analysis dump a .prof file. All files of one run are grouped in a
{timestamp_ms}_{main_pid} subdirectory, which worker processes learn from the
_POINTDUP_PROFILE_SESSION_DIR environment variable set by the main process.
"""
import cProfile
import functools
import itertools
import os
import time
from pathlib import Path
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec('P')
T = TypeVar('T')

PROFILE_ENVIRONMENT_VARIABLE = 'POINTDUP_PROFILE'
SESSION_ENVIRONMENT_VARIABLE = '_POINTDUP_PROFILE_SESSION_DIR'

# Keeps file names unique within one process
_sequence = itertools.count()


def session_name() -> str:
    session = os.environ.get(SESSION_ENVIRONMENT_VARIABLE)
    if session:
        return session
    return f"{int(time.time() * 1000)}_{os.getpid()}"


def profile_directory() -> Path | None:
    """Directory for this run's profile data, or None when profiling is off."""
    root = os.environ.get(PROFILE_ENVIRONMENT_VARIABLE)
    if not root:
        return None
    return Path(root) / session_name()


def profile_filename(prefix: str = "profile") -> str:
    """File name like "worker_54398_0.prof": prefix, process id, sequence number."""
    return f"{prefix}_{os.getpid()}_{next(_sequence)}.prof"


def profile_function(func: Callable[P, T], prefix: str = "profile") -> Callable[P, T]:
    """Wrap func so that each call is profiled while POINTDUP_PROFILE is set."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        directory = profile_directory()
        if directory is None:
            return func(*args, **kwargs)

        directory.mkdir(parents=True, exist_ok=True)
        profiler = cProfile.Profile()
        profiler.enable()
        try:
            return func(*args, **kwargs)
        finally:
            profiler.disable()
            profiler.dump_stats(str(directory / profile_filename(prefix)))

    return wrapper


def profile_main(func: Callable[P, T]) -> Callable[P, T]:
    """Profile the entry point and pin the session directory for worker processes."""
    profiled = profile_function(func, prefix="main")

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        if os.environ.get(PROFILE_ENVIRONMENT_VARIABLE):
            os.environ[SESSION_ENVIRONMENT_VARIABLE] = session_name()
        return profiled(*args, **kwargs)

    return wrapper


def profile_worker(func: Callable[P, T]) -> Callable[P, T]:
    return profile_function(func, prefix="worker")
