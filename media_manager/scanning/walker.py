import logging
import os
from pathlib import Path
from typing import List

from ..cancellation import CancellationToken
from ..exceptions import DirectoryReadError, ImportCancelled
from ..models import ImportMapping
from ..organization.naming import NameBuilder
from .classify import get_media_type, normalize_extension


class DirectoryWalker:
    """
    Depth-first, pre-order walk of an input tree.

    Entries are handled in the order the directory listing yields them; a
    subdirectory is descended into as soon as it is met. The token is checked
    before every entry and a cancelled token stops the walk at every depth.
    There is no per-file error isolation: the first FileStatError or
    DirectoryReadError ends the walk.
    """
    def __init__(self, builder: NameBuilder, no_traverse: bool = False):
        self.builder = builder
        self.no_traverse = no_traverse
        self.mappings: List[ImportMapping] = []

    def walk(self, token: CancellationToken, root: Path) -> List[ImportMapping]:
        """
        Returns the mappings computed for every file under `root`.
        Raises ImportCancelled once `token` is cancelled; self.mappings then
        holds the files handled before the check.
        """
        self._check_cancelled(token)
        self._walk_dir(token, root)
        return self.mappings

    def walk_file(self, token: CancellationToken, path: Path) -> List[ImportMapping]:
        """Single-file input."""
        self._check_cancelled(token)
        self._process_file(path)
        return self.mappings

    def _walk_dir(self, token: CancellationToken, directory: Path):
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise DirectoryReadError(directory, e.strerror or e) from e

        for entry in entries:
            self._check_cancelled(token)

            path = Path(entry.path)
            logging.debug(f"{path}")

            if entry.is_dir(follow_symlinks=False):
                if self.no_traverse:
                    logging.debug(f"Not traversing into {path}")
                    continue
                self._walk_dir(token, path)
            elif entry.is_file(follow_symlinks=False):
                self._process_file(path)
            else:
                logging.debug(f"Skipping {path}: not a regular file")

    def _process_file(self, path: Path):
        ext = normalize_extension(path.suffix)
        if not ext:
            logging.debug(f"Skipping {path}: no extension")
            return

        media_type = get_media_type(ext)
        name = self.builder.build(path, media_type)
        destination = self.builder.output_root / name.relative_path

        logging.info(f"{path} -> {destination} [{media_type}, {name.timestamp.source.value}]")
        self.mappings.append(ImportMapping(path, destination))

    def _check_cancelled(self, token: CancellationToken):
        if token.is_cancelled:
            raise ImportCancelled("Graceful shutdown")
