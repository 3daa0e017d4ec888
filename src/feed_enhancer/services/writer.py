"""Atomic output writing for filtered feeds."""

import shutil
import tempfile
from pathlib import Path


class OutputWriter:
    """Writes filtered documents and copies files into the output tree."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Initialize the output writer.

        Args:
            encoding: Text encoding for feed documents (default: utf-8)
        """
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        """
        Read a feed document without newline translation.

        Raises:
            UnicodeDecodeError: If the file is not valid in the configured encoding
        """
        with open(path, 'r', encoding=self.encoding, newline='') as f:
            return f.read()

    def write_text(self, dest: Path, content: str) -> None:
        """
        Atomically write text to the destination path.

        Args:
            dest: Destination file path
            content: Text to write, written byte-for-byte without newline translation

        Raises:
            IOError: If writing fails
        """
        dest.parent.mkdir(parents=True, exist_ok=True)

        try:
            with tempfile.NamedTemporaryFile(
                mode='w',
                encoding=self.encoding,
                newline='',
                dir=dest.parent,
                delete=False,
                suffix='.tmp'
            ) as temp_file:
                temp_path = Path(temp_file.name)
                temp_file.write(content)
                temp_file.flush()

            # Atomic move to final location
            temp_path.replace(dest)

        except Exception as e:
            # Clean up temporary file if it exists
            if 'temp_path' in locals() and temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise IOError(f"Failed to write {dest}: {e}")

    def copy_file(self, src: Path, dest: Path) -> None:
        """Copy a file verbatim, creating the parent directory if needed."""
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
