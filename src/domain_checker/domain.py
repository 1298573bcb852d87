"""Domain name value type with a suffix-major ordering."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


def _char_less(left: str, right: str) -> bool:
    # '.' sorts below every other character
    return (left == "." or left < right) and right != "."


@total_ordering
@dataclass(frozen=True)
class Domain:
    """A single domain name, stored verbatim.

    Domains are ordered by comparing their names from the last character
    backward, so a domain always sorts before its subdomains and all
    subdomains of a domain sort contiguously right after it:

        >>> sorted([Domain("maps.com"), Domain("gdz.ua"), Domain("gdz.ru")])
        [Domain(name='gdz.ua'), Domain(name='maps.com'), Domain(name='gdz.ru')]
    """

    name: str

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        for left, right in zip(reversed(self.name), reversed(other.name)):
            if _char_less(left, right):
                return True
            if _char_less(right, left):
                return False
        return len(self.name) < len(other.name)

    def is_subdomain(self, other: Domain) -> bool:
        """Check if this domain equals ``other`` or lies underneath it."""
        return len(self.name) >= len(other.name) and f".{self.name}".endswith(f".{other.name}")
