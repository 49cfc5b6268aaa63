"""In-memory fake implementation of OutputRedirect for testing."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fedimintd_mobile.integrations.output_redirect.abc import OutputRedirect


class FakeOutputRedirect(OutputRedirect):
    """Fake that records redirections without touching the real streams.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution.
    """

    def __init__(self, *, error: OSError | None = None) -> None:
        """Create FakeOutputRedirect.

        Args:
            error: If set, raised on every redirect() call, simulating a log
                file that cannot be opened
        """
        self._error = error
        self._redirected_paths: list[Path] = []
        self._active_paths: list[Path] = []

    @property
    def redirected_paths(self) -> list[Path]:
        """Paths passed to successful redirect() calls, in order."""
        return self._redirected_paths.copy()

    @property
    def active_path(self) -> Path | None:
        """Path currently receiving output, or None when not redirected."""
        if not self._active_paths:
            return None
        return self._active_paths[-1]

    @contextmanager
    def redirect(self, log_path: Path) -> Iterator[None]:
        """Record the redirection for the duration of the context."""
        if self._error is not None:
            raise self._error
        self._redirected_paths.append(log_path)
        self._active_paths.append(log_path)
        try:
            yield
        finally:
            self._active_paths.pop()
