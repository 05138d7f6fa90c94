"""File save service used by the list export."""
import asyncio
import threading
from pathlib import Path
from typing import Optional, Protocol, Union

from grocery.config.settings import get_settings
from grocery.utils.logger import get_logger
from grocery.domain.errors import ExportCancelled

logger = get_logger(__name__)


class FileSaverService(Protocol):
    """Anything that can save text content under a file name."""

    async def save_file(
        self,
        filename: str,
        content: str,
        cancel_event: Optional[threading.Event] = None
    ) -> Path:
        ...


def _check_cancelled(cancel_event: Optional[threading.Event], filename: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise ExportCancelled(f"Opslaan van {filename} is geannuleerd")


class LocalFileSaver:
    """Saves files as UTF-8 text into a local directory."""

    def __init__(self, directory: Union[str, Path, None] = None):
        """
        Initialize the saver.

        Args:
            directory: Target directory (default: EXPORT_DIR setting)
        """
        self.directory = Path(directory) if directory else get_settings().EXPORT_DIR

    async def save_file(
        self,
        filename: str,
        content: str,
        cancel_event: Optional[threading.Event] = None
    ) -> Path:
        """
        Write content to a file in the target directory.

        Args:
            filename: Plain file name, no directory parts
            content: Text to write
            cancel_event: Set to abort the save

        Returns:
            Path of the written file

        Raises:
            ExportCancelled: If cancel_event was set before the file was in place
            ValueError: If filename contains directory parts
            OSError: If the file cannot be written
        """
        if not filename or Path(filename).name != filename:
            raise ValueError(f"Ongeldige bestandsnaam: {filename!r}")

        _check_cancelled(cancel_event, filename)

        target = self.directory / filename
        partial = target.with_name(target.name + ".part")
        try:
            await asyncio.to_thread(self._write, partial, content)
            _check_cancelled(cancel_event, filename)
            partial.replace(target)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise

        logger.info("File saved", path=str(target), size=len(content))
        return target

    def _write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
