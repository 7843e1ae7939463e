from __future__ import annotations
import importlib.util
import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .errors import ParseError, TraversalError

logger = logging.getLogger(__name__)

_STRING_PREFIX_CHARS = set("rRuU")


def iter_source_files(base_dir: str, extension: str = ".py", skip_dirs: Iterable[str] = ()) -> Iterator[str]:
    """Yield paths of regular files ending in ``extension`` under ``base_dir``.

    Directories and files are visited in lexical order. Any walk failure
    (missing base, permission denied, dangling symlink) raises TraversalError.
    """
    skip = set(skip_dirs)

    def _onerror(err: OSError) -> None:
        raise TraversalError(err.filename or base_dir, f"cannot walk directory ({err.strerror or err})") from err

    for root, dirs, files in os.walk(base_dir, onerror=_onerror):
        dirs[:] = sorted(d for d in dirs if d not in skip)
        for fn in sorted(files):
            if not fn.endswith(extension):
                continue
            path = os.path.join(root, fn)
            try:
                st = os.stat(path)
            except OSError as e:
                raise TraversalError(path, f"cannot stat file ({e.strerror or e})") from e
            if not stat.S_ISREG(st.st_mode):
                logger.debug("skipping non-regular file %s", path)
                continue
            yield path


def read_source(path: str) -> str:
    """Read a Python source file, honouring its PEP 263 encoding cookie."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise TraversalError(path, f"cannot read file ({e.strerror or e})") from e
    try:
        return importlib.util.decode_source(data)
    except (SyntaxError, UnicodeDecodeError, LookupError) as e:
        raise ParseError(path, f"cannot decode source: {e}") from e


def normalize_scenario(text: str) -> str:
    """Drop every tab character, then trim surrounding whitespace."""
    return text.replace("\t", "").strip()


def split_string_literal(token: str) -> Optional[Tuple[str, str, str, str]]:
    """
    Split the raw source of a string literal into (prefix, quote, body, rest).

    ``rest`` is whatever follows the closing quote; it is non-empty when the
    span holds an implicit concatenation such as ``"a" "b"``. Escapes are not
    interpreted. Returns None when ``token`` does not start with a literal.
    """
    i = 0
    while i < len(token) and token[i] in _STRING_PREFIX_CHARS:
        i += 1
    prefix = token[:i]
    if token.startswith('"""', i) or token.startswith("'''", i):
        quote = token[i:i + 3]
    elif token[i:i + 1] in ('"', "'"):
        quote = token[i]
    else:
        return None

    start = i + len(quote)
    j = start
    while j < len(token):
        if token[j] == "\\":
            j += 2
            continue
        if token.startswith(quote, j):
            return prefix, quote, token[start:j], token[j + len(quote):]
        j += 1
    return None
