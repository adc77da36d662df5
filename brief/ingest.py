"""Plain-text file ingestion.

Only text files are read.  PDFs and other binary formats are rejected with a
short message telling the user to paste the text instead; nothing is
converted.
"""

import logging
from pathlib import Path

from brief.models import UnsupportedFormatError

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = frozenset({".txt", ".text"})


def read_text_file(path: Path) -> str:
    """Return the full UTF-8 content of a plain-text file.

    Raises:
        UnsupportedFormatError: if the file is not a ``.txt`` file, its
            bytes are not valid UTF-8, or it cannot be read (a directory,
            missing permissions).
        FileNotFoundError: if ``path`` does not exist.
    """
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        raise UnsupportedFormatError(
            "PDF support: Please copy and paste the text from your PDF file."
        )
    if suffix not in TEXT_SUFFIXES:
        raise UnsupportedFormatError(
            "Unsupported file format. Please upload TXT files or paste text directly."
        )

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as e:
        raise UnsupportedFormatError(
            f"Error reading file {path.name}: not valid UTF-8 text."
        ) from e
    except OSError as e:
        raise UnsupportedFormatError(
            f"Error reading file {path.name}. Please try again."
        ) from e

    logger.info("Read %s (%s chars)", path.name, f"{len(text):,}")
    return text
