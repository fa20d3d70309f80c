"""Asset sources: where token and lexicon streams come from.

The core only ever consumes already-open streams. An ``AssetSource`` turns a
logical name such as ``"tokens.txt"`` into such a stream, either from a
directory on disk or from resources shipped inside an installed package.
"""

import io
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Tuple, Union

from ..exceptions import AssetNotFoundError, StreamDecodeError
from .logging import get_logger

logger = get_logger(__name__)

Stream = Union[Iterable[str], Iterable[bytes]]


def iter_lines(stream: Stream) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs with line endings stripped.

    Accepts text or binary streams; bytes are decoded as UTF-8.

    Raises:
        StreamDecodeError: If a line is not valid UTF-8
    """
    lines = iter(stream)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(lines)
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            # Text streams opened with the wrong encoding fail inside next()
            raise StreamDecodeError(
                f"Line {line_number} is not valid UTF-8: {e}", line_number=line_number
            ) from e
        yield line_number, raw.rstrip("\r\n")


class AssetSource:
    """Base class for anything that produces readable binary streams by name.

    Subclasses must implement :meth:`open` and :meth:`exists`.
    """

    def open(self, name: str) -> BinaryIO:
        """Open an asset for reading.

        Raises:
            AssetNotFoundError: If the source has no asset with that name
        """
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        """Check whether an asset is available."""
        raise NotImplementedError


class DirectoryAssetSource(AssetSource):
    """Assets stored as plain files under a directory."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        return self.root / name

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def open(self, name: str) -> BinaryIO:
        path = self._path(name)
        if not path.is_file():
            raise AssetNotFoundError(f"Asset not found: {path}")
        logger.debug(f"Opening asset {path}")
        return open(path, "rb")

    def __repr__(self) -> str:
        return f"DirectoryAssetSource({str(self.root)!r})"


class PackageAssetSource(AssetSource):
    """Assets shipped as package data inside an installed package."""

    def __init__(self, package: str, subdir: str = ""):
        self.package = package
        self.subdir = subdir

    def _resource(self, name: str):
        base = resources.files(self.package)
        if self.subdir:
            base = base.joinpath(self.subdir)
        return base.joinpath(name)

    def exists(self, name: str) -> bool:
        # files() raises TypeError for a plain module on Python < 3.12
        try:
            return self._resource(name).is_file()
        except (ModuleNotFoundError, TypeError):
            return False

    def open(self, name: str) -> BinaryIO:
        if not self.exists(name):
            raise AssetNotFoundError(
                f"Asset not found: {name} in package {self.package}"
            )
        logger.debug(f"Opening packaged asset {self.package}:{name}")
        # Read fully so the stream stays valid for zipped packages too
        return io.BytesIO(self._resource(name).read_bytes())

    def __repr__(self) -> str:
        return f"PackageAssetSource({self.package!r}, subdir={self.subdir!r})"
