"""EmailService — validate addresses and split them into parts."""

from __future__ import annotations

import logging

from valkit.domain.email import Email, domain_part, local_part
from valkit.services.base import BaseService
from valkit.services.contracts import EmailData, EmailPartsData, dump_validated
from valkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class EmailService(BaseService):
    """Email address validation through the ``Email`` factory."""

    def check(self, raw: str) -> ServiceResult:
        """Validate *raw* and return its parts.

        Fails with ``INVALID_FORMAT`` when the factory returns no value.
        Addresses longer than ``email.warn_length`` succeed with a warning.
        """
        op = "check_email"
        email = Email.from_string(raw)
        if email is None:
            logger.debug("Rejected malformed email %r", raw)
            return ServiceResult.failure(
                op,
                "INVALID_FORMAT",
                f"Not a valid email address: {raw!r}",
                detail={"value": raw},
            )

        warnings: list[str] = []
        limit = self._settings.email.warn_length
        if len(email.value) > limit:
            warnings.append(f"Address is {len(email.value)} characters, over the {limit} limit")

        data = dump_validated(
            EmailData,
            {
                "value": email.value,
                "local_part": email.local_part,
                "domain_part": email.domain_part,
            },
        )
        return ServiceResult.success(op, data, warnings=warnings)

    def parts(self, text: str) -> ServiceResult:
        """Split arbitrary text at the first ``@`` without requiring validity."""
        domain = domain_part(text)
        warnings = [] if domain is not None else ["Text contains no '@'; domain part is absent"]
        data = dump_validated(
            EmailPartsData,
            {
                "text": text,
                "local_part": local_part(text),
                "domain_part": domain,
                "valid": Email.from_string(text) is not None,
            },
        )
        return ServiceResult.success("email_parts", data, warnings=warnings)
