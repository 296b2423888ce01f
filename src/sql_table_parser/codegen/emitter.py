"""Persist generated artifacts to the file system."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..errors import EmissionError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileEmitter:
    """Write text files under a root directory.

    Emitting the same file twice overwrites the earlier content.
    """

    def __init__(self, root: Optional[PathLike] = None):
        """Initialize the emitter.

        Args:
            root: Base for relative directories. Uses the current working
                directory if None.
        """
        self.root = Path(root) if root is not None else Path.cwd()

    def emit(self, directory: PathLike, file_name: str, content: str) -> Path:
        """Write `content` to `directory/file_name`, creating directories.

        Returns:
            The absolute path written.

        Raises:
            EmissionError: Wrapping the OSError and the target path.
        """
        target_dir = self.root / directory
        path = target_dir / file_name
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise EmissionError(path, e) from e

        logger.info("Wrote %s", path)
        return path.resolve()
