"""Email value object with a checked factory.

``Email`` instances can only be produced by :meth:`Email.from_string`,
which returns ``None`` instead of raising when the text is not a
well-formed address. Direct construction and ``dataclasses.replace``
both fail because they cannot supply the module-private construction key.

INVARIANT: every ``Email`` instance satisfies :data:`EMAIL_PATTERN`.
"""

from __future__ import annotations

import re
from dataclasses import InitVar, dataclass

# ASCII-only so that case folding never admits non-ASCII look-alikes
# such as U+212A KELVIN SIGN.
EMAIL_PATTERN = re.compile(
    r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,6}$",
    re.IGNORECASE | re.ASCII,
)

_CONSTRUCTION_KEY = object()


def is_valid_email(raw: str) -> bool:
    """Check whether *raw* is a well-formed email address.

    The whole string must match; a trailing newline is rejected.

    Examples:
        >>> is_valid_email("sherlock@holmes.com")
        True
        >>> is_valid_email("a@b.c")
        False
    """
    return EMAIL_PATTERN.fullmatch(raw) is not None


@dataclass(frozen=True, slots=True)
class Email:
    """A validated email address.

    Attributes:
        value: The address exactly as given to the factory (case preserved).
    """

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        if _key is not _CONSTRUCTION_KEY:
            msg = "Email cannot be constructed directly; use Email.from_string()"
            raise TypeError(msg)

    @classmethod
    def from_string(cls, raw: str) -> Email | None:
        """Return an ``Email`` for *raw*, or ``None`` if it is malformed."""
        if not is_valid_email(raw):
            return None
        return cls(raw, _CONSTRUCTION_KEY)

    @property
    def local_part(self) -> str:
        return local_part(self.value)

    @property
    def domain_part(self) -> str:
        # EMAIL_PATTERN guarantees an "@".
        return self.value.partition("@")[2]

    def __str__(self) -> str:
        return self.value


def try_create(raw: str) -> Email | None:
    """Module-level alias for :meth:`Email.from_string`."""
    return Email.from_string(raw)


def local_part(text: str | Email) -> str:
    """Return everything before the first ``@``.

    Works on unvalidated text too. Text without ``@`` is returned whole.

    Examples:
        >>> local_part("sherlock@holmes.com")
        'sherlock'
        >>> local_part("no-at-sign")
        'no-at-sign'
    """
    raw = text.value if isinstance(text, Email) else text
    return raw.partition("@")[0]


def domain_part(text: str | Email) -> str | None:
    """Return everything strictly after the first ``@``.

    Returns ``None`` when the text contains no ``@``.

    Examples:
        >>> domain_part("sherlock@holmes.com")
        'holmes.com'
        >>> domain_part("no-at-sign") is None
        True
    """
    raw = text.value if isinstance(text, Email) else text
    _, sep, domain = raw.partition("@")
    if not sep:
        return None
    return domain
