"""
HTML escaping of files and directory trees.

Each file is read whole, escaped, and either printed under a banner or
written to <dest>/<base name>.txt. Failures on individual files are
recorded in the run's EscapeReport and the walk carries on, unless
errors.fail_fast is set.
"""

import codecs
import html
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import IO, Iterable, List, Optional

from .config import ConfigManager
from .errors import FileProcessingError
from .paths import exists
from .walker import iter_files

logger = logging.getLogger(__name__)

DEFAULT_DIR_MODE = 0o775
DEFAULT_FILE_MODE = 0o644

# html.escape(quote=True) emits &quot; and &#x27;; output must use the
# numeric forms below.
_QUOTE_ENTITIES = str.maketrans({"'": "&#39;", '"': "&#34;"})


def escape_html(text: str) -> str:
    """
    Escape the five HTML-significant characters.

    & ' < > " become &amp; &#39; &lt; &gt; &#34;. Ampersands are replaced
    before anything else, so entities produced here are not escaped again.
    """
    return html.escape(text, quote=False).translate(_QUOTE_ENTITIES)


@dataclass
class SkippedFile:
    """A file that could not be processed."""
    path: str
    stage: str  # read, decode or write
    reason: str


@dataclass
class EscapeReport:
    """Outcome of one run."""
    processed: List[str] = field(default_factory=list)
    written: List[str] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)

    def summary_lines(self, limit: int = 10) -> List[str]:
        """Human readable list of skipped files, empty when nothing was skipped."""
        if not self.skipped:
            return []
        lines = [f"Skipped {len(self.skipped)} file(s):"]
        for item in self.skipped[:limit]:
            lines.append(f"  - {item.path}: {item.reason}")
        if len(self.skipped) > limit:
            lines.append(f"  ... and {len(self.skipped) - limit} more")
        return lines


class Escaper:
    """
    Escapes a stream of file paths and routes the results.

    Args:
        destination: Output directory, or None to print to the console
        config: Loaded configuration (defaults when omitted)
        out: Stream for banners, escaped text and notices (default stdout)

    Raises:
        LookupError: If output.encoding names an unknown codec
    """

    def __init__(self, destination: Optional[str] = None,
                 config: Optional[ConfigManager] = None,
                 out: Optional[IO[str]] = None):
        self.destination = destination
        self.config = config or ConfigManager()
        self.out = out if out is not None else sys.stdout

        self.encoding = self.config.get('output.encoding', 'utf-8')
        codecs.lookup(self.encoding)
        self.suffix = self.config.get('output.suffix', '.txt')
        self.banner_rule = (self.config.get('output.banner_char', '=')
                            * self.config.get_int('output.banner_width', 72))
        self.dir_mode = self.config.get_mode('output.dir_mode', DEFAULT_DIR_MODE)
        self.file_mode = self.config.get_mode('output.file_mode', DEFAULT_FILE_MODE)
        self.fail_fast = bool(self.config.get('errors.fail_fast', False))

        self.report = EscapeReport()

    def run(self, source: str) -> EscapeReport:
        """Walk source and escape every file found."""
        return self.process(iter_files(source))

    def process(self, paths: Iterable[str]) -> EscapeReport:
        """Escape each path in order; the paths need not come from a walk."""
        for path in paths:
            self.process_file(path)
        return self.report

    def process_file(self, path: str) -> None:
        try:
            with open(path, 'rb') as f:
                raw = f.read()
        except OSError as e:
            self._skip(path, 'read', e)
            return

        try:
            escaped = escape_html(raw.decode(self.encoding, 'surrogateescape'))
        except UnicodeError as e:
            self._skip(path, 'decode', e)
            return

        if self.destination is None:
            self._print_escaped(path, escaped)
        elif not self._write_escaped(path, escaped):
            return
        self.report.processed.append(path)

    def _encode(self, text: str) -> bytes:
        try:
            return text.encode(self.encoding, 'surrogateescape')
        except UnicodeEncodeError:
            return text.encode(self.encoding, 'replace')

    def _emit(self, text: str) -> None:
        """Write text to out, as raw bytes when the stream has a binary buffer."""
        data = self._encode(text)
        buffer = getattr(self.out, 'buffer', None)
        if buffer is None:
            # Plain text streams (StringIO) cannot carry undecodable bytes
            self.out.write(data.decode(self.encoding, 'replace'))
            return
        self.out.flush()
        buffer.write(data)
        buffer.flush()

    def print_banner(self, title: str) -> None:
        self._emit(f"{self.banner_rule}\n{title}\n{self.banner_rule}\n")

    def _print_escaped(self, path: str, escaped: str) -> None:
        self.print_banner(path)
        self._emit(escaped + "\n")

    def _ensure_destination(self) -> None:
        if exists(self.destination) is not None:
            return
        try:
            os.makedirs(self.destination, mode=self.dir_mode, exist_ok=True)
        except OSError as e:
            # The write below fails and gets recorded against the file
            logger.warning("Unable to create directory: %s (%s)", self.destination, e)
            return
        self._emit(f"Creating directory: {self.destination}\n")

    def _write_escaped(self, path: str, escaped: str) -> bool:
        try:
            self._ensure_destination()
        except OSError as e:
            logger.debug("Cannot inspect %s: %s", self.destination, e)

        new_path = os.path.join(self.destination, os.path.basename(path) + self.suffix)
        self._emit(f"Creating {new_path}\n")
        try:
            data = escaped.encode(self.encoding, 'surrogateescape')
        except UnicodeError as e:
            self._skip(path, 'write', e)
            return False

        flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, 'O_BINARY', 0)
        try:
            fd = os.open(new_path, flags, self.file_mode)
            with open(fd, 'wb') as f:
                f.write(data)
        except OSError as e:
            self._skip(path, 'write', e)
            return False

        self.report.written.append(new_path)
        return True

    def _skip(self, path: str, stage: str, error: BaseException) -> None:
        if self.fail_fast:
            raise FileProcessingError(path, stage, error) from error
        logger.debug("Skipping %s (%s): %s", path, stage, error)
        self.report.skipped.append(SkippedFile(path, stage, str(error)))


def escape(source: str, destination: Optional[str] = None,
           config: Optional[ConfigManager] = None,
           out: Optional[IO[str]] = None) -> EscapeReport:
    """
    Escape source (a file or directory tree).

    Args:
        source: File or directory to escape
        destination: Directory for <name>.txt outputs; None prints to out
        config: Configuration, defaults when omitted
        out: Console stream (default stdout)

    Returns:
        EscapeReport listing processed, written and skipped files

    Raises:
        FileProcessingError: On the first failing file when errors.fail_fast is set
    """
    return Escaper(destination, config=config, out=out).run(source)
