"""Directory scanning and prompt assembly."""

from __future__ import annotations

import contextlib
import os
import stat
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

from .matching import GlobPattern, PatternError
from .tokens import estimate_tokens

_KNOWN_TEXT_EXTENSIONS = frozenset(
    {".go", ".js", ".ts", ".py", ".txt", ".md", ".html", ".css",
     ".json", ".xml", ".yaml", ".yml", ".toml"}
)
_SNIFF_SIZE = 512
_CONTROL_RATIO_LIMIT = 0.3


class ProcessorError(Exception):
    """Raised when a directory cannot be processed."""


@dataclass
class Config:
    """Settings for a processing run."""

    dir_path: str
    include_files: list[str] = field(default_factory=list)
    exclude_files: list[str] = field(default_factory=list)
    output: str = "-"
    estimate_tokens: bool = False


class _TextSink:
    """Lets a text stream stand in where bytes are written."""

    def __init__(self, stream) -> None:
        self._stream = stream

    def write(self, data: bytes) -> int:
        self._stream.write(data.decode("utf-8", errors="replace"))
        return len(data)

    def flush(self) -> None:
        self._stream.flush()


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _base_name(path: str) -> str:
    stripped = path.rstrip("/" + os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def _to_slash(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


def is_text_file(path: str) -> bool:
    """Guess whether a file holds text.

    Files with a well-known text extension are text. Otherwise the first
    512 bytes are checked: any NUL byte, or more than 30% control bytes,
    marks the file as binary. Raises OSError if the file cannot be read.
    """
    if _extension(path).lower() in _KNOWN_TEXT_EXTENSIONS:
        return True
    with open(path, "rb") as handle:
        head = handle.read(_SNIFF_SIZE)
    if b"\x00" in head:
        return False
    control = sum(1 for b in head if (b < 32 and b not in (9, 10, 13)) or b >= 127)
    return not (head and control / len(head) > _CONTROL_RATIO_LIMIT)


@dataclass
class _Node:
    name: str
    is_dir: bool
    children: dict[str, "_Node"] = field(default_factory=dict)

    def sorted_children(self) -> list["_Node"]:
        return sorted(self.children.values(), key=lambda n: (not n.is_dir, n.name))


def generate_directory_structure(files: list[str]) -> str:
    """Render the given relative paths as a tree."""
    if not files:
        return "No files matched the criteria.\n\n"

    root = _Node("./", True)
    for path in sorted(files):
        *dirs, leaf = _to_slash(path).split("/")
        node = root
        for part in dirs:
            node = node.children.setdefault(part, _Node(part, True))
        node.children.setdefault(leaf, _Node(leaf, False))

    lines = ["Directory Structure:\n\n", "└── ./\n"]

    def render(node: _Node, prefix: str) -> None:
        children = node.sorted_children()
        for position, child in enumerate(children):
            last = position == len(children) - 1
            lines.append(prefix + ("└── " if last else "├── ") + child.name + "\n")
            render(child, prefix + ("    " if last else "│   "))

    render(root, "")
    lines.append("\n")
    return "".join(lines)


class Processor:
    """Collects matching text files under a directory and writes them out."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.include_patterns = self._compile(config.include_files, "include")
        self.exclude_patterns = self._compile(config.exclude_files, "exclude")

    @staticmethod
    def _compile(patterns: list[str], kind: str) -> tuple[GlobPattern, ...]:
        compiled = []
        for pattern in patterns:
            try:
                compiled.append(GlobPattern(pattern))
            except PatternError as err:
                raise ProcessorError(f"invalid {kind} pattern '{pattern}': {err}") from err
        return tuple(compiled)

    def should_include_file(self, rel_path: str) -> bool:
        """Exclusions win; otherwise a path must match an include pattern."""
        if any(p.match(rel_path) for p in self.exclude_patterns):
            return False
        return any(p.match(rel_path) for p in self.include_patterns)

    def collect_files(self) -> list[str]:
        """Walk the directory and return matching text files, in walk order.

        Hidden files and directories (names starting with '.') are skipped.
        Matching files that look binary are reported on stderr and left out.
        """
        root = self.config.dir_path
        try:
            root_is_dir = stat.S_ISDIR(os.lstat(root).st_mode)
        except OSError as err:
            raise ProcessorError(str(err)) from err
        matched: list[str] = []
        self._visit(root, _base_name(root), root_is_dir, matched)
        return matched

    def _visit(self, path: str, name: str, is_dir: bool, matched: list[str]) -> None:
        if name.startswith("."):
            return
        if is_dir:
            try:
                with os.scandir(path) as entries:
                    ordered = sorted(entries, key=lambda e: e.name)
            except OSError as err:
                raise ProcessorError(str(err)) from err
            for entry in ordered:
                self._visit(entry.path, entry.name, entry.is_dir(follow_symlinks=False), matched)
            return

        rel_path = os.path.relpath(path, self.config.dir_path)
        if not self.should_include_file(rel_path):
            return
        try:
            text = is_text_file(path)
        except OSError as err:
            raise ProcessorError(f"failed to check if file is text: {err}") from err
        if text:
            matched.append(rel_path)
        else:
            sys.stderr.write(f"Warning: Skipping binary file: {rel_path}\n")

    def write_file(self, abs_path: str, rel_path: str, stream: BinaryIO) -> bytes:
        """Write one file with its header to ``stream`` and return what was written."""
        # Flush first so a file that is also the output sees everything so far.
        stream.flush()
        with open(abs_path, "rb") as handle:
            content = handle.read()
        header = f"---\nFile: {_to_slash(rel_path)}\n---\n\n".encode("utf-8")
        chunk = header + content + b"\n\n"
        stream.write(chunk)
        return chunk

    @contextlib.contextmanager
    def _open_output(self) -> Iterator[BinaryIO]:
        target = self.config.output
        if target in ("", "-"):
            sys.stdout.flush()
            buffer = getattr(sys.stdout, "buffer", None)
            stream = buffer if buffer is not None else _TextSink(sys.stdout)
            try:
                yield stream
            finally:
                stream.flush()
            return
        try:
            handle = open(target, "wb")
        except OSError as err:
            raise ProcessorError(f"failed to create output file: {err}") from err
        with handle:
            yield handle

    def process(self) -> None:
        """Scan the directory and write the tree and file contents to the output."""
        with self._open_output() as out:
            files = self.collect_files()
            if not files:
                sys.stderr.write("No text files found or all matched files were binary.\n")
                return

            files.sort()
            structure = generate_directory_structure(files).encode("utf-8")
            out.write(structure)
            written = [structure]

            for rel_path in files:
                abs_path = os.path.join(self.config.dir_path, rel_path)
                try:
                    chunk = self.write_file(abs_path, rel_path, out)
                except OSError as err:
                    raise ProcessorError(f"failed to process file {rel_path}: {err}") from err
                if self.config.estimate_tokens:
                    written.append(chunk)

            if self.config.estimate_tokens:
                out.flush()
                tokens = estimate_tokens(b"".join(written).decode("utf-8", errors="replace"))
                sys.stderr.write(f"\nEstimated tokens: {tokens}\n")