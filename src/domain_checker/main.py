from __future__ import annotations

import sys

import structlog

from .checker import DomainChecker
from .config import settings
from .domain import Domain
from .errors import DomainCheckerError
from .logging_config import setup_logging
from .models import CheckStats, Verdict
from .output import OutputHandler, StreamHandler
from .source import DomainSource, StreamSource

log = structlog.get_logger()


def check_domains(checker: DomainChecker, queries: list[Domain]) -> list[Verdict]:
    """Return one verdict per query, in query order."""
    return [checker.verdict(domain) for domain in queries]


def run(source: DomainSource, handlers: list[OutputHandler]) -> CheckStats:
    stats = CheckStats()

    # 1. Build the checker from the block-list
    blocklist = source.read_blocklist()
    stats.blocklist_size = len(blocklist)
    checker = DomainChecker(blocklist)
    stats.forbidden_size = len(checker)

    # 2. Read the queries
    queries = source.read_queries()
    stats.queries = len(queries)

    if not queries:
        log.info("no_queries")

    # 3. Check and emit in input order
    for domain, verdict in zip(queries, check_domains(checker, queries)):
        match verdict:
            case Verdict.FORBIDDEN:
                stats.forbidden_count += 1
            case Verdict.ALLOWED:
                stats.allowed_count += 1
        for h in handlers:
            h.emit_verdict(domain, verdict)

    log.info("run_complete", **stats.model_dump())
    return stats


def main() -> None:
    setup_logging(settings.log_level, settings.log_json)
    log.info("starting_domain_checker")

    try:
        run(StreamSource(sys.stdin), [StreamHandler(sys.stdout)])
    except DomainCheckerError as exc:
        log.error("invalid_input", error=str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
