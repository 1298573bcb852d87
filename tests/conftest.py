"""Shared pytest fixtures for domain checker tests."""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
import structlog

from domain_checker.domain import Domain


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None]:
    """Drop logging configuration that points at a closed capture stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def blocklist() -> list[Domain]:
    return [Domain(name) for name in ("gdz.ru", "maps.me", "m.gdz.ru", "com")]


@pytest.fixture
def queries() -> list[Domain]:
    names = ("gdz.ru", "gdz.com", "m.maps.me", "alg.m.gdz.ru", "maps.com", "maps.ru", "gdz.ua")
    return [Domain(name) for name in names]


def render_input(blocklist: list[str], queries: list[str]) -> str:
    """Render both sections in the count-then-lines input layout."""
    lines = [str(len(blocklist)), *blocklist, str(len(queries)), *queries]
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_input() -> Callable[[list[str], list[str]], str]:
    return render_input
