"""Base file operations for the MCP file context server.

This module provides the filesystem calls the server is built on: a recursive
directory walker, a flat listing of the base directory, and text file reads.
All paths handed back to callers are relative to the base directory.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

import anyio
from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


def _scan(directory: Union[str, Path]) -> List[os.DirEntry]:
    with os.scandir(directory) as entries:
        return list(entries)


class FileOperations:
    """Read-only file operations rooted at a fixed base directory."""

    def __init__(self, base_dir: Union[str, Path]):
        """Initialize with the base directory.

        Args:
            base_dir: Directory all relative paths are resolved against.
                      Normalized to an absolute path.

        Raises:
            ValueError: If base_dir is not an existing directory
        """
        abs_path = Path(base_dir).expanduser().resolve()
        if not abs_path.is_dir():
            raise ValueError(f"Not a directory: {base_dir}")

        self.base_dir = abs_path
        logger.debug(f"Using base directory: {abs_path}")

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path against the base directory.

        No containment check is made: paths with '..' segments or absolute
        paths are returned as joined.
        """
        return self.base_dir / path

    def relative(self, path: Union[str, Path]) -> str:
        return os.path.relpath(path, self.base_dir)

    async def list_files_recursively(
        self, directory: Optional[Union[str, Path]] = None
    ) -> List[str]:
        """List every file beneath a directory, at any depth.

        Entries come back in directory-listing order, depth first, and are
        never sorted. Directories are descended into but not reported.
        Symlinks are reported as files and never followed.

        Args:
            directory: Directory to walk (default: the base directory)

        Returns:
            Paths relative to the base directory

        Raises:
            OSError: If any directory cannot be read; the walk is aborted
        """
        root = self.base_dir if directory is None else self.resolve(directory)

        files: List[str] = []
        # One iterator of pending entries per open directory, deepest last
        pending = [iter(await anyio.to_thread.run_sync(_scan, root))]

        while pending:
            entry = next(pending[-1], None)
            if entry is None:
                pending.pop()
            elif entry.is_dir(follow_symlinks=False):
                entries = await anyio.to_thread.run_sync(_scan, entry.path)
                pending.append(iter(entries))
            else:
                files.append(self.relative(entry.path))

        return files

    async def list_directory(self) -> List[str]:
        """List the immediate entries of the base directory.

        Returns:
            File and subdirectory names, unsorted

        Raises:
            OSError: If the base directory cannot be read
        """
        return await anyio.to_thread.run_sync(os.listdir, self.base_dir)

    async def read_file(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read a text file.

        The file is decoded as-is, without newline translation, so the
        returned text matches the bytes on disk.

        Args:
            path: Path to the file, relative to the base directory
            encoding: Text encoding (default: utf-8)

        Returns:
            File contents as string

        Raises:
            ValueError: If the file cannot be decoded
            FileNotFoundError: If file does not exist
            IsADirectoryError: If path is a directory
            PermissionError: If file cannot be read
        """
        abs_path = self.resolve(path)
        data = await anyio.to_thread.run_sync(abs_path.read_bytes)

        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            raise ValueError(f"Cannot decode file as {encoding}: {path}")
