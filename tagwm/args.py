"""Short-option command line scanning in the classic clustered style."""

from __future__ import annotations

from typing import Iterator, Sequence


class UsageError(Exception):
    """Raised when an option is missing its required argument."""


class ArgReader:
    """Iterate over the option letters of ``argv``.

    ``argv[0]`` is the program name.  Options may be clustered (``-ab``),
    and an option's argument may be attached (``-fvalue``) or follow it.
    Scanning stops at ``--``, at ``-`` alone or at the first non-option.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        argv = list(argv)
        self.argv0 = argv[0] if argv else ""
        self._args = argv[1:]
        self._index = 0
        self._pos = 0
        self._brk = False
        self._active = False

    def __iter__(self) -> Iterator[str]:
        while self._index < len(self._args):
            arg = self._args[self._index]
            if not (arg.startswith("-") and len(arg) > 1):
                break
            if arg == "--":
                self._index += 1
                break
            start = self._index
            self._brk = False
            self._pos = 1
            self._active = True
            while self._pos < len(arg) and not self._brk and self._index == start:
                yield arg[self._pos]
                self._pos += 1
            self._active = False
            self._index += 1

    def _take(self, required: bool) -> str | None:
        if not self._active:
            raise RuntimeError("no option is being scanned")
        arg = self._args[self._index]
        rest = arg[self._pos + 1:]
        if not rest and self._index + 1 >= len(self._args):
            if required:
                raise UsageError(f"option requires an argument -- '{arg[self._pos]}'")
            return None
        self._brk = True
        if rest:
            return rest
        self._index += 1
        return self._args[self._index]

    def value(self) -> str:
        """The current option's argument; raises UsageError if absent."""
        result = self._take(required=True)
        assert result is not None
        return result

    def optional_value(self) -> str | None:
        """The current option's argument, or None if there is none."""
        return self._take(required=False)

    def remaining(self) -> list[str]:
        """Arguments left after option scanning."""
        return self._args[self._index:]