from pathlib import Path
from typing import Union

from ..models import PathContext


def extract_path_components(path: Union[str, Path], levels: int) -> PathContext:
    """
    Returns the last `levels` parent directory names of `path` (parent-to-child)
    together with its filename.

    Only normal components count: the root/drive and any "." or ".." are
    dropped. The final component is taken as the filename unless the path is
    an existing directory, in which case the filename is empty.

    >>> extract_path_components("/a/b/c/file.jpg", 2)
    PathContext(segments=('b', 'c'), filename='file.jpg')
    """
    p = Path(path)
    parts = [part for part in p.parts if part not in (p.anchor, '.', '..')]

    if parts and not p.is_dir():
        filename = parts.pop()
    else:
        filename = ""

    if levels <= 0:
        return PathContext((), filename)
    return PathContext(tuple(parts[-levels:]), filename)
