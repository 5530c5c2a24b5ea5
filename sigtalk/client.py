"""Client: sends a text message to a server process bit by bit over signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Sequence

from sigtalk.chars import atoi
from sigtalk.codec import encode_byte, frame_message

DEFAULT_DELAY = 0.0001

_SUCCESS = "\n\033[1;32m SUCCESS » \033[0;37mMessage successfully received by server!\n\n"
_WRONG_PID = "\n\033[1;31m FAILED » \033[0;37mWrong PID!\n\n"


class SendError(OSError):
    """A signal could not be delivered to the target process."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"Something went wrong when sending signal to {pid}")
        self.pid = pid


class _Acknowledged(Exception):
    """The server confirmed the whole message."""


def parse_pid(text: str) -> int:
    """Read a process id the way the command line gives it; zero is refused."""
    pid = atoi(text)
    if not pid:
        raise ValueError("Wrong PID!")
    return pid


def send_byte(pid: int, value: int, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte as eight signals: SIGUSR1 for a 1 bit, SIGUSR2 for a 0."""
    for bit in encode_byte(value):
        try:
            os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        except OSError as exc:
            raise SendError(pid) from exc
        time.sleep(delay)


def send_message(pid: int, data: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of data followed by the terminating zero byte."""
    for value in frame_message(data):
        send_byte(pid, value, delay)


def _on_acknowledge(signum: int, frame: object) -> None:
    """Report the server's confirmation and stop sending."""
    sys.stdout.write(_SUCCESS)
    sys.stdout.flush()
    raise _Acknowledged(signum)


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given on the command line to the given pid."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
    out = sys.stdout
    if len(args) != 2:
        out.write("\n\033[1;33m FAILED » \033[0;37mCorrect usage: ")
        out.write(f"{prog} <pid> <message>\n\n")
        out.flush()
        return 1

    previous = {
        signum: signal.signal(signum, handler)
        for signum, handler in (
            (signal.SIGUSR2, _on_acknowledge),
            (signal.SIGUSR1, signal.SIG_IGN),
        )
    }
    try:
        try:
            pid = parse_pid(args[0])
        except ValueError:
            out.write(_WRONG_PID)
            return 1
        try:
            send_message(pid, args[1])
        except SendError as exc:
            out.write(
                "\n\033[1;31m FAILED » \033[0;37mSomething went wrong when"
                f" sending signal to \033[1;35m{exc.pid}\n\n"
            )
            return 1
        except ValueError as exc:
            out.write(f"\n\033[1;31m FAILED » \033[0;37m{exc}\n\n")
            return 1
        except _Acknowledged:
            return 0
        return 0
    finally:
        out.flush()
        for signum, handler in previous.items():
            signal.signal(signum, handler)


if __name__ == "__main__":
    sys.exit(main())