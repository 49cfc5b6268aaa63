"""Real output redirection by duplicating file descriptors."""

import errno
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fedimintd_mobile.integrations.output_redirect.abc import OutputRedirect

_REDIRECTED_FDS = (1, 2)


def _save_fd(fd: int) -> int:
    """Duplicate fd so it can be restored later.

    A closed fd is first pointed at the null device, so the log file never
    lands on fd 1 or 2 itself.
    """
    try:
        return os.dup(fd)
    except OSError as err:
        if err.errno != errno.EBADF:
            raise
    null_fd = os.open(os.devnull, os.O_RDWR)
    if null_fd != fd:
        os.dup2(null_fd, fd)
        os.close(null_fd)
    return os.dup(fd)


class RealOutputRedirect(OutputRedirect):
    """Production implementation using os.dup2 on fds 1 and 2.

    Redirecting the descriptors (not just sys.stdout) also captures writes
    from native code and from child processes that inherit the streams.
    Works in a process started without a console, where sys.stdout and
    sys.stderr are None and fds 1 and 2 may be closed. On exit such fds are
    left pointing at the null device.
    """

    @contextmanager
    def redirect(self, log_path: Path) -> Iterator[None]:
        """Redirect fds 1 and 2 plus sys.stdout/sys.stderr to log_path."""
        saved_streams = (sys.stdout, sys.stderr)
        saved_fds: list[int] = []
        log_file = None
        try:
            for fd in _REDIRECTED_FDS:
                saved_fds.append(_save_fd(fd))
            log_file = open(log_path, "a", buffering=1, encoding="utf-8")
            for stream in saved_streams:
                if stream is not None:
                    stream.flush()
            for fd in _REDIRECTED_FDS:
                os.dup2(log_file.fileno(), fd)
            sys.stdout = log_file
            sys.stderr = log_file
            yield
        finally:
            if log_file is not None:
                log_file.flush()
            sys.stdout, sys.stderr = saved_streams
            for fd, saved_fd in zip(_REDIRECTED_FDS, saved_fds):
                os.dup2(saved_fd, fd)
                os.close(saved_fd)
            if log_file is not None:
                log_file.close()
