from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable

import structlog

from .domain import Domain
from .models import Verdict

log = structlog.get_logger()


class DomainChecker:
    """Answers whether a domain is covered by a fixed block-list.

    The block-list is sorted and reduced once, on construction, to the minimal
    set of domains whose subdomains cover every entry. That leaves at most one
    candidate ancestor per query: the last forbidden domain sorting at or
    before it.
    """

    __slots__ = ("_forbidden",)

    def __init__(self, domains: Iterable[Domain]) -> None:
        domains = list(domains)
        self._forbidden = self._prepare_forbidden_domains(domains)
        log.debug(
            "forbidden_domains_prepared",
            before=len(domains),
            after=len(self._forbidden),
            removed=len(domains) - len(self._forbidden),
        )

    @staticmethod
    def _prepare_forbidden_domains(domains: list[Domain]) -> tuple[Domain, ...]:
        """Sort the block-list and drop duplicates and redundant subdomains."""
        prepared: list[Domain] = []
        for domain in sorted(domains):
            if prepared and (domain.is_subdomain(prepared[-1]) or prepared[-1].is_subdomain(domain)):
                continue
            prepared.append(domain)
        return tuple(prepared)

    @property
    def forbidden(self) -> tuple[Domain, ...]:
        return self._forbidden

    def __len__(self) -> int:
        return len(self._forbidden)

    def is_forbidden(self, domain: Domain) -> bool:
        pos = bisect_right(self._forbidden, domain)
        if pos == 0:
            return False
        return domain.is_subdomain(self._forbidden[pos - 1])

    def verdict(self, domain: Domain) -> Verdict:
        return Verdict.FORBIDDEN if self.is_forbidden(domain) else Verdict.ALLOWED
