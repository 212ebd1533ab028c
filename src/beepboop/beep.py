"""Terminal bell signal emitted once the target is up."""

import sys
from typing import Optional, TextIO

from beepboop.contracts import SignalEmitter

BELL = "\a"


class TerminalBell(SignalEmitter):
    """Rings the terminal bell by writing BEL to the given stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream: Optional[TextIO] = stream

    def emit(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(BELL)
        stream.flush()
