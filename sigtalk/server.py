"""Server: prints its pid, then assembles and prints messages sent by signals."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from sigtalk.codec import MessageAssembler

_INDENT = " " * 22
_BANNER = (
    "\n\n\n\n",
    "\x1b[35m╭───────────────────────────────────────────────────────────────╮\n",
    "   ███╗   ███╗██╗███╗   ██╗██╗████████╗ █████╗ ██╗     ██╗  ██╗\n",
    "   ████╗ ████║██║████╗  ██║██║╚══██╔══╝██╔══██╗██║     ██║ ██╔╝\n",
    "   ██╔████╔██║██║██╔██╗ ██║██║   ██║   ███████║██║     █████╔╝ \n",
    "   ██║╚██╔╝██║██║██║╚██╗██║██║   ██║   ██╔══██║██║     ██╔═██╗ \n",
    "   ██║ ╚═╝ ██║██║██║ ╚████║██║   ██║   ██║  ██║███████╗██║  ██╗\n",
    "   ╚═╝     ╚═╝╚═╝╚═╝  ╚═══╝╚═╝   ╚═╝   ╚═╝  ╚═╝╚══════╝╚═╝  ╚═╝\n",
    "\x1b[35m╰───────────────────────────────────────────────────────────────╯\n",
    "\n\n",
)
_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


def render_header(pid: int) -> str:
    """Return the start-up banner that shows the server's pid."""
    lines = [f"{_INDENT}\033[1;34m{line}" for line in _BANNER]
    lines.append(f"{' ' * 36}\x1b[35m{pid}\n")
    lines.append(f"{' ' * 27}\033[1;34m╰──────[  PID  ]──────╯\n\n\n")
    return "".join(lines)


def _acknowledge(pid: int) -> None:
    with contextlib.suppress(OSError):
        os.kill(pid, signal.SIGUSR2)


class Server:
    """Turns incoming SIGUSR1/SIGUSR2 signals into printed messages."""

    def __init__(
        self,
        output: TextIO | None = None,
        acknowledge: Callable[[int], object] | None = None,
    ) -> None:
        self._output = output if output is not None else sys.stdout
        self._acknowledge = acknowledge if acknowledge is not None else _acknowledge
        self._assembler = MessageAssembler()

    def handle(self, signum: int, sender_pid: int) -> bytes | None:
        """Take one signal as one bit; print and acknowledge a finished message."""
        message = self._assembler.feed(signum == signal.SIGUSR1)
        if message is None:
            return None
        text = message.decode("utf-8", errors="replace")
        self._output.write(f"\033[1;35m Received » \033[0;37m{text}\n")
        self._output.flush()
        self._acknowledge(sender_pid)
        return message

    def serve_forever(self) -> None:
        """Wait for signals and handle each one, until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the banner and serve until interrupted."""
    sys.stdout.write(render_header(os.getpid()))
    sys.stdout.flush()
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())