"""
Identifier format recognition.

Two formats are accepted for AnonCreds object identifiers:

* URI identifiers: ``<scheme>:<opaque>``, e.g. ``did:example:123``
* legacy Indy identifiers: 21 or 22 characters of the base58 alphabet

Both patterns are compiled once, on first use, and shared for the rest of
the process.
"""
import logging
import re
import threading
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Everything after the first colon is accepted, the tail is not checked.
# Compiled with re.DOTALL, so the tail may contain newlines; the Rust
# anoncreds `^...:.+$` rejects them since its `.` stops at `\n`.
URI_IDENTIFIER_EXPRESSION = r"[a-zA-Z0-9+\-.]+:.+"

# base58 alphabet as defined in
# https://datatracker.ietf.org/doc/html/draft-msporny-base58#section-2
# Strings that merely fall within the alphabet and length also match; there
# is no checksum to verify legacy identifiers against.
LEGACY_IDENTIFIER_EXPRESSION = r"[1-9A-HJ-NP-Za-km-z]{21,22}"


class LazyPattern:
    """Regular expression compiled exactly once, on first access."""

    def __init__(self, expression: str, flags: int = 0):
        self.expression = expression
        self.flags = flags
        self._compiled: Optional[re.Pattern] = None
        self._lock = threading.Lock()

    @property
    def is_compiled(self) -> bool:
        return self._compiled is not None

    def get(self) -> re.Pattern:
        """
        Return the compiled pattern, compiling it on the first call.

        Returns:
            The shared compiled pattern.
        """
        compiled = self._compiled
        if compiled is not None:
            return compiled
        with self._lock:
            if self._compiled is None:
                self._compiled = re.compile(self.expression, self.flags)
                logger.debug("Compiled identifier pattern %r", self.expression)
            return self._compiled

    def fullmatch(self, candidate: str) -> Optional[re.Match]:
        """Match the whole candidate against the pattern."""
        return self.get().fullmatch(candidate)

    def __repr__(self) -> str:
        state = "compiled" if self.is_compiled else "pending"
        return f"LazyPattern({self.expression!r}, {state})"


URI_IDENTIFIER = LazyPattern(URI_IDENTIFIER_EXPRESSION, re.DOTALL)
LEGACY_IDENTIFIER = LazyPattern(LEGACY_IDENTIFIER_EXPRESSION)


def is_uri_identifier(candidate: Any) -> bool:
    """
    Check if a string is a URI identifier (``scheme:tail``).

    Args:
        candidate: String to check.

    Returns:
        True if the whole string matches, False otherwise.
    """
    if not isinstance(candidate, str):
        return False
    return URI_IDENTIFIER.fullmatch(candidate) is not None


def is_legacy_identifier(candidate: Any) -> bool:
    """
    Check if a string is a legacy base58 identifier.

    Args:
        candidate: String to check.

    Returns:
        True if the whole string matches, False otherwise.
    """
    if not isinstance(candidate, str):
        return False
    return LEGACY_IDENTIFIER.fullmatch(candidate) is not None


def is_identifier(candidate: Any) -> bool:
    """True for either a URI or a legacy identifier."""
    return is_uri_identifier(candidate) or is_legacy_identifier(candidate)
