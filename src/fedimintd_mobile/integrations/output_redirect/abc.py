"""Abstract interface for redirecting process output into a log file."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from pathlib import Path


class OutputRedirect(ABC):
    """Abstract interface for capturing stdout/stderr into a durable file.

    A mobile host usually has no console attached, so anything the node
    writes to the standard streams is lost unless it is redirected.
    """

    @abstractmethod
    def redirect(self, log_path: Path) -> AbstractContextManager[None]:
        """Send all standard output and error writes to log_path.

        The file is opened in append mode and created if missing. Entering
        the context again re-points the streams at the new file. On exit,
        on every path including errors, the streams are flushed and restored.

        Args:
            log_path: File that receives the output

        Raises:
            OSError: If the file cannot be created or opened
        """
        ...
