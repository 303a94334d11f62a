# -*- coding: utf-8 -*-
"""Line scanner for SSH client config and git config text.

Both formats are read with one small state machine. Each line is first
classified into a :class:`LineKind` by a dialect-specific classifier; the
scanner then moves between the :class:`ScanState` values through the
explicit ``_TRANSITIONS`` table and hands every step to the caller as a
:class:`ScanEvent`. Neither reader is a general parser: they only pick out
``Host`` blocks and ``[includeIf "gitdir:..."]`` stanzas.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, Iterator, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, Field


class ScanState(str, Enum):
    OUTSIDE = "outside"
    IN_HOST_BLOCK = "in_host_block"
    IN_INCLUDE_IF_BLOCK = "in_include_if_block"


class LineKind(str, Enum):
    BLANK = "blank"
    HOST_HEADER = "host_header"
    INCLUDE_IF_HEADER = "include_if_header"
    OTHER_HEADER = "other_header"
    PATH_ASSIGNMENT = "path_assignment"
    KEY_VALUE = "key_value"


_S = ScanState
_K = LineKind

# (state, line kind) -> next state. BLANK never changes state.
_TRANSITIONS: Dict[Tuple[ScanState, LineKind], ScanState] = {
    (_S.OUTSIDE, _K.HOST_HEADER): _S.IN_HOST_BLOCK,
    (_S.OUTSIDE, _K.INCLUDE_IF_HEADER): _S.IN_INCLUDE_IF_BLOCK,
    (_S.OUTSIDE, _K.OTHER_HEADER): _S.OUTSIDE,
    (_S.OUTSIDE, _K.PATH_ASSIGNMENT): _S.OUTSIDE,
    (_S.OUTSIDE, _K.KEY_VALUE): _S.OUTSIDE,
    (_S.IN_HOST_BLOCK, _K.HOST_HEADER): _S.IN_HOST_BLOCK,
    (_S.IN_HOST_BLOCK, _K.INCLUDE_IF_HEADER): _S.IN_INCLUDE_IF_BLOCK,
    (_S.IN_HOST_BLOCK, _K.OTHER_HEADER): _S.OUTSIDE,
    (_S.IN_HOST_BLOCK, _K.PATH_ASSIGNMENT): _S.IN_HOST_BLOCK,
    (_S.IN_HOST_BLOCK, _K.KEY_VALUE): _S.IN_HOST_BLOCK,
    (_S.IN_INCLUDE_IF_BLOCK, _K.HOST_HEADER): _S.IN_HOST_BLOCK,
    (_S.IN_INCLUDE_IF_BLOCK, _K.INCLUDE_IF_HEADER): _S.IN_INCLUDE_IF_BLOCK,
    (_S.IN_INCLUDE_IF_BLOCK, _K.OTHER_HEADER): _S.OUTSIDE,
    # Only the first ``path`` after the header belongs to the stanza.
    (_S.IN_INCLUDE_IF_BLOCK, _K.PATH_ASSIGNMENT): _S.OUTSIDE,
    (_S.IN_INCLUDE_IF_BLOCK, _K.KEY_VALUE): _S.IN_INCLUDE_IF_BLOCK,
}


class ClassifiedLine(NamedTuple):
    kind: LineKind
    key: str = ""
    value: str = ""


class ScanEvent(NamedTuple):
    lineno: int
    state: ScanState
    line: ClassifiedLine
    next_state: ScanState


Classifier = Callable[[str], ClassifiedLine]


def next_state(state: ScanState, kind: LineKind) -> ScanState:
    """Return the state reached from *state* on a line of *kind*."""
    if kind is LineKind.BLANK:
        return state
    return _TRANSITIONS[(state, kind)]


def scan_lines(text: str, classify: Classifier) -> Iterator[ScanEvent]:
    """Run the state machine over *text*, yielding one event per line."""
    state = ScanState.OUTSIDE
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = classify(raw)
        new_state = next_state(state, line.kind)
        yield ScanEvent(lineno, state, line, new_state)
        state = new_state


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


# ---------------------------------------------------------------------------
# SSH client config
# ---------------------------------------------------------------------------

_SSH_KEYWORD_RE = re.compile(r"^(\S+?)(?:\s*=\s*|\s+)(.*)$")


def classify_ssh_line(raw: str) -> ClassifiedLine:
    line = raw.strip()
    if not line or line.startswith("#"):
        return ClassifiedLine(LineKind.BLANK)
    match = _SSH_KEYWORD_RE.match(line)
    if match:
        keyword, value = match.group(1), match.group(2).strip()
    else:
        keyword, value = line, ""
    lowered = keyword.lower()
    if lowered == "host":
        if not value:
            return ClassifiedLine(LineKind.OTHER_HEADER, keyword)
        return ClassifiedLine(LineKind.HOST_HEADER, keyword, value)
    if lowered == "match":
        return ClassifiedLine(LineKind.OTHER_HEADER, keyword, value)
    return ClassifiedLine(LineKind.KEY_VALUE, keyword, _unquote(value))


class HostBlock(BaseModel):
    """A ``Host`` block from an SSH client config."""

    patterns: List[str] = Field(default_factory=list)
    options: Dict[str, str] = Field(
        default_factory=dict,
        description="Options keyed by lower-cased keyword, first value wins",
    )
    lineno: int = 0

    def option(self, keyword: str) -> str:
        return self.options.get(keyword.lower(), "")


def parse_host_blocks(text: str) -> List[HostBlock]:
    """Return every ``Host`` block in *text* in file order."""
    blocks: List[HostBlock] = []
    current: Optional[HostBlock] = None
    for event in scan_lines(text, classify_ssh_line):
        kind = event.line.kind
        if kind is LineKind.HOST_HEADER:
            current = HostBlock(
                patterns=event.line.value.split(),
                lineno=event.lineno,
            )
            blocks.append(current)
        elif event.next_state is not ScanState.IN_HOST_BLOCK:
            current = None
        elif kind is LineKind.KEY_VALUE and current is not None:
            current.options.setdefault(
                event.line.key.lower(),
                event.line.value,
            )
    return blocks


# ---------------------------------------------------------------------------
# git config
# ---------------------------------------------------------------------------

_INCLUDE_IF_RE = re.compile(
    r'^\[\s*includeif\s+"gitdir:(?P<pattern>(?:[^"\\]|\\.)*)"\s*\]',
    re.IGNORECASE,
)
_SUBSECTION_ESCAPE_RE = re.compile(r"\\(.)")

# Escapes git understands inside values; any other escaped char is kept.
_GIT_VALUE_ESCAPES = {"n": "\n", "t": "\t", "b": "\b"}


def escape_git_string(value: str) -> str:
    """Escape a string for use between double quotes in git config."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )


def _unescape_subsection(value: str) -> str:
    return _SUBSECTION_ESCAPE_RE.sub(lambda m: m.group(1), value)


def _parse_git_value(raw: str) -> str:
    """Decode a git config value: quotes, escapes and trailing comments."""
    out: List[str] = []
    quoted = False
    chars = iter(raw.strip())
    for ch in chars:
        if ch == "\\":
            escaped = next(chars, "")
            out.append(_GIT_VALUE_ESCAPES.get(escaped, escaped))
        elif ch == '"':
            quoted = not quoted
        elif ch in "#;" and not quoted:
            break
        else:
            out.append(ch)
    return "".join(out).strip()


def classify_git_line(raw: str) -> ClassifiedLine:
    line = raw.strip()
    if not line or line[0] in "#;":
        return ClassifiedLine(LineKind.BLANK)
    if line.startswith("["):
        match = _INCLUDE_IF_RE.match(line)
        if match:
            return ClassifiedLine(
                LineKind.INCLUDE_IF_HEADER,
                "includeIf",
                _unescape_subsection(match.group("pattern")),
            )
        return ClassifiedLine(LineKind.OTHER_HEADER, line)
    key, sep, value = line.partition("=")
    key = key.strip()
    value = _parse_git_value(value) if sep else ""
    if key.lower() == "path" and sep:
        return ClassifiedLine(LineKind.PATH_ASSIGNMENT, key, value)
    return ClassifiedLine(LineKind.KEY_VALUE, key, value)


class IncludeIfStanza(BaseModel):
    """An ``[includeIf "gitdir:..."]`` stanza and the path it includes."""

    gitdir: str
    path: Optional[str] = None
    lineno: int = 0


def parse_include_if_stanzas(text: str) -> List[IncludeIfStanza]:
    """Return every ``gitdir:`` stanza in *text*, orphans included.

    Orphaned stanzas (no ``path`` before the next section header) have
    ``path=None``.
    """
    stanzas: List[IncludeIfStanza] = []
    for event in scan_lines(text, classify_git_line):
        kind = event.line.kind
        if kind is LineKind.INCLUDE_IF_HEADER:
            stanzas.append(
                IncludeIfStanza(gitdir=event.line.value, lineno=event.lineno),
            )
        elif (
            kind is LineKind.PATH_ASSIGNMENT
            and event.state is ScanState.IN_INCLUDE_IF_BLOCK
        ):
            stanzas[-1].path = event.line.value
    return stanzas
