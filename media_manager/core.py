import logging
from pathlib import Path
from typing import Optional, Union

from . import config
from .cancellation import CancellationToken
from .exceptions import ImportCancelled, InputPathNotFoundError
from .metadata.extract import MetadataReader
from .metadata.timestamps import TimestampResolver
from .organization.naming import NameBuilder
from .scanning.walker import DirectoryWalker
from .models import ImportResult


class MediaManagerApp:
    def __init__(self,
                 reader: Optional[MetadataReader] = None,
                 resolver: Optional[TimestampResolver] = None):
        self.reader = reader or MetadataReader()
        self.resolver = resolver or TimestampResolver()

    def import_media(self,
                     token: CancellationToken,
                     input_path: Union[str, Path],
                     output_path: Union[str, Path],
                     no_traverse: bool = False,
                     levels: int = config.DEFAULT_PATH_LEVELS) -> ImportResult:
        """
        Runs the import pipeline.
        1. Canonicalize the input (must exist)
        2. Resolve or create the output root
        3. Walk the input, naming every media file

        A cancelled token ends the walk early and is reported through
        ImportResult.cancelled, not as an exception.
        """
        logging.info("Importing media files...")

        try:
            input_root = Path(input_path).resolve(strict=True)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise InputPathNotFoundError(input_path) from e

        output_root = self._prepare_output_root(Path(output_path))

        logging.debug(f"Input path: {input_root}, output path: {output_root}, no traverse: {no_traverse}")

        builder = NameBuilder(output_root, reader=self.reader, resolver=self.resolver, levels=levels)
        walker = DirectoryWalker(builder, no_traverse=no_traverse)
        result = ImportResult(input_root=input_root, output_root=output_root)

        try:
            if input_root.is_dir():
                walker.walk(token, input_root)
            else:
                walker.walk_file(token, input_root)
        except ImportCancelled:
            result.cancelled = True
        finally:
            result.mappings = walker.mappings

        if result.cancelled:
            logging.info(f"Import cancelled after {result.files_processed} files.")
        else:
            logging.info(f"Import complete. Processed {result.files_processed} files.")
        return result

    def _prepare_output_root(self, output_path: Path) -> Path:
        try:
            return output_path.resolve(strict=True)
        except FileNotFoundError:
            pass

        # Path.cwd() / absolute path is the absolute path itself
        output_root = Path.cwd() / output_path
        logging.info(f"Creating output directory {output_root}")
        output_root.mkdir(parents=True, exist_ok=True)
        return output_root.resolve()


def import_media(token: CancellationToken,
                 input_path: Union[str, Path],
                 output_path: Union[str, Path],
                 no_traverse: bool = False,
                 levels: int = config.DEFAULT_PATH_LEVELS) -> ImportResult:
    return MediaManagerApp().import_media(token, input_path, output_path, no_traverse, levels)
