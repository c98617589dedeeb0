"""Split a command's argument text into a preamble and prefixed values.

    tokenize("1 n/Alice t/friend t/owesMoney", NAME, TAG)
    -> preamble "1", n/ -> ["Alice"], t/ -> ["friend", "owesMoney"]

A prefix only counts when it starts the text or follows whitespace, so "n/"
is not found inside "nkn/".
"""

import re
from dataclasses import dataclass

from clientbook.application.errors import DuplicateArgumentError

MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): "
)


@dataclass(frozen=True)
class Prefix:
    """Marker such as 'n/' that introduces an argument value."""

    text: str

    def __str__(self) -> str:
        return self.text


class ArgumentMultimap:
    """Prefix -> values in encounter order, plus the preamble."""

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = {}
        self._preamble = ""

    def put(self, prefix: Prefix | None, value: str) -> None:
        if prefix is None:
            self._preamble = value
            return
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Last value given for prefix, or None."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self._preamble

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise DuplicateArgumentError if any of the given prefixes occurs more than once."""
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise DuplicateArgumentError(
                MESSAGE_DUPLICATE_FIELDS + " ".join(str(p) for p in duplicated)
            )


def _find_positions(text: str, prefix: Prefix) -> list[int]:
    return [m.start() for m in re.finditer(r"(?<=\s)" + re.escape(prefix.text), text)]


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize args against the given prefixes. Pure: no state is kept between calls."""
    text = " " + (args or "")
    found: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        found.extend((pos, prefix) for pos in _find_positions(text, prefix))
    found.sort(key=lambda item: item[0])

    multimap = ArgumentMultimap()
    first = found[0][0] if found else len(text)
    multimap.put(None, text[:first].strip())
    for i, (pos, prefix) in enumerate(found):
        end = found[i + 1][0] if i + 1 < len(found) else len(text)
        multimap.put(prefix, text[pos + len(prefix.text):end].strip())
    return multimap
