# utils/archive.py
"""
ZIP archive writer used by bulk media download.

Entries are written into a spooled temporary file: small archives stay in
memory, larger ones roll over to disk. The finished archive is read back in
fixed-size chunks for the response body.
"""
import tempfile
import zipfile
from typing import Iterator

SPOOL_MAX_BYTES = 8 * 1024 * 1024
CHUNK_SIZE = 64 * 1024


class ZipArchive:
     def __init__(self, compresslevel: int = 9, spool_max_bytes: int = SPOOL_MAX_BYTES):
          self._file = tempfile.SpooledTemporaryFile(max_size=spool_max_bytes)
          self._zip = zipfile.ZipFile(
               self._file, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=compresslevel
          )
          self._names: set[str] = set()

     def append(self, data: bytes, entry_name: str) -> str:
          """Add an entry; taken names become 'name (2).ext', 'name (3).ext'."""
          name = self._unique_name(entry_name)
          self._zip.writestr(name, data)
          self._names.add(name)
          return name

     def finalize(self):
          """Close the ZIP directory and rewind. Returns the underlying file."""
          self._zip.close()
          self._file.seek(0)
          return self._file

     def iter_chunks(self, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
          return iter(lambda: self._file.read(chunk_size), b"")

     def close(self) -> None:
          self._zip.close()
          self._file.close()

     def _unique_name(self, entry_name: str) -> str:
          if entry_name not in self._names:
               return entry_name
          stem, dot, ext = entry_name.rpartition(".")
          count = 2
          while True:
               if dot:
                    candidate = f"{stem} ({count}).{ext}"
               else:
                    candidate = f"{entry_name} ({count})"
               if candidate not in self._names:
                    return candidate
               count += 1
