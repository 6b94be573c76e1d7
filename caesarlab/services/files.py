"""Line-based text file helpers feeding the cipher from the menu and CLI."""

import logging
from pathlib import Path

from caesarlab.core.exceptions import FileProcessingError
from caesarlab.services.engines.caesar import decrypt, encrypt

logger = logging.getLogger(__name__)


def _read_lines(path: str | Path, encoding: str) -> list[str]:
    try:
        with open(path, encoding=encoding) as handle:
            # text mode already folds \r and \r\n into \n
            return [line.rstrip("\n") for line in handle]
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(str(path), str(e)) from e


def read_lines_joined(
    path: str | Path,
    separator: str = "",
    encoding: str = "utf-8",
    keep_trailing: bool = False,
) -> str:
    """
    Read a file's lines without terminators and join them.

    Args:
        path: File to read
        separator: Inserted after each line (between lines unless keep_trailing)
        encoding: File encoding
        keep_trailing: Also append the separator after the last line
    """
    lines = _read_lines(path, encoding)
    if keep_trailing:
        return "".join(line + separator for line in lines)
    return separator.join(lines)


def process_file(
    input_path: str | Path,
    output_path: str | Path,
    key: int,
    encrypt_mode: bool,
    encoding: str = "utf-8",
) -> int:
    """
    Encrypt or decrypt a file line by line.

    Each processed line is written followed by a newline.

    Returns:
        Number of lines written
    """
    transform = encrypt if encrypt_mode else decrypt
    lines = _read_lines(input_path, encoding)

    try:
        with open(output_path, "w", encoding=encoding) as handle:
            for line in lines:
                handle.write(transform(line, key))
                handle.write("\n")
    except OSError as e:
        raise FileProcessingError(str(output_path), str(e)) from e

    logger.info(
        "%s %d lines from %s to %s",
        "Encrypted" if encrypt_mode else "Decrypted",
        len(lines),
        input_path,
        output_path,
    )
    return len(lines)


def write_brute_force_report(
    path: str | Path,
    candidates: list[str],
    encoding: str = "utf-8",
) -> None:
    """Write one ``Key <n>:`` block per candidate, keys starting at 1."""
    try:
        with open(path, "w", encoding=encoding) as handle:
            for key, candidate in enumerate(candidates, start=1):
                handle.write(f"Key {key}:\n")
                handle.write(candidate)
                handle.write("\n\n")
    except OSError as e:
        raise FileProcessingError(str(path), str(e)) from e

    logger.info("Wrote %d brute force candidates to %s", len(candidates), path)
