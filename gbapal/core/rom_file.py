"""
GBA Palette Tools - ROM File Handle

Shared random-access handle to a ROM image. Every transfer seeks and
reads (or writes) while holding one lock, so callers sharing the handle
never interleave their seeks.
"""

import io
import os
import threading
from typing import BinaryIO


class RomIOError(OSError):
    """Raised when a seek, read or write against the ROM fails or is short."""

    pass


class RomFile:
    """
    Lock-guarded random-access ROM storage.

    Usage:
        with RomFile.open("game.gba", writable=True) as rom:
            block = rom.read_at(0x1234, 32)
            rom.write_at(0x1234, block)
    """

    def __init__(self, stream: BinaryIO, name: str = "<stream>"):
        """
        Wrap an open binary stream.

        Args:
            stream: Seekable binary stream (file object or BytesIO)
            name: Label used in error messages
        """
        self._stream = stream
        self._lock = threading.Lock()
        self.name = name

    @classmethod
    def open(cls, rom_path: str, writable: bool = False) -> "RomFile":
        """
        Open a ROM image on disk.

        Args:
            rom_path: Path to ROM file
            writable: Open for update ("r+b") instead of read-only

        Returns:
            RomFile instance owning the file handle
        """
        stream = open(rom_path, "r+b" if writable else "rb")
        try:
            rom = cls(stream, str(rom_path))
            size = rom.size()
        except BaseException:
            stream.close()
            raise
        print(f"ROM loaded: {rom_path} ({size // 1024}KB)")
        return rom

    @classmethod
    def from_bytes(cls, data: bytes) -> "RomFile":
        """Create an in-memory ROM image (writable)."""
        return cls(io.BytesIO(data), "<memory>")

    def read_at(self, offset: int, length: int) -> bytes:
        """
        Read exactly `length` bytes at an absolute offset.

        Args:
            offset: Byte offset from start of ROM
            length: Number of bytes to read

        Returns:
            Requested bytes

        Raises:
            RomIOError: If seek or read fails, or fewer bytes are available
        """
        with self._lock:
            try:
                self._stream.seek(offset, os.SEEK_SET)
                data = self._stream.read(length)
            except (OSError, ValueError) as e:
                raise RomIOError(
                    f"Read of {length} bytes at 0x{offset:X} in {self.name} failed: {e}"
                ) from e

        if len(data) != length:
            raise RomIOError(
                f"Short read at 0x{offset:X} in {self.name}: "
                f"expected {length} bytes, got {len(data)}"
            )
        return data

    def write_at(self, offset: int, data: bytes):
        """
        Write bytes at an absolute offset.

        Args:
            offset: Byte offset from start of ROM
            data: Bytes to write

        Raises:
            RomIOError: If seek or write fails, or the write is short
        """
        with self._lock:
            try:
                self._stream.seek(offset, os.SEEK_SET)
                written = self._stream.write(data)
                self._stream.flush()
            except (OSError, ValueError) as e:
                raise RomIOError(
                    f"Write of {len(data)} bytes at 0x{offset:X} in {self.name} failed: {e}"
                ) from e

        if written is not None and written != len(data):
            raise RomIOError(
                f"Short write at 0x{offset:X} in {self.name}: "
                f"expected {len(data)} bytes, wrote {written}"
            )

    def size(self) -> int:
        """Return the ROM size in bytes."""
        with self._lock:
            position = self._stream.tell()
            end = self._stream.seek(0, os.SEEK_END)
            self._stream.seek(position, os.SEEK_SET)
        return end

    def getvalue(self) -> bytes:
        """Return the full contents of an in-memory ROM."""
        if not isinstance(self._stream, io.BytesIO):
            raise TypeError(f"{self.name} is not an in-memory ROM")
        return self._stream.getvalue()

    def close(self):
        with self._lock:
            self._stream.close()

    def __enter__(self) -> "RomFile":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
