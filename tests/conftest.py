# topmark:header:start
#
#   project      : ValueKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ValueKit test suite.

Sets up global fixtures and the logging configuration for test runs.

Notes:
    The architecture registry is process-global. Tests that swap its alias
    table must go through the `isolated_arch_registry` fixture, which restores
    the built-in table and clears the cache afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from valuekit.arch.registry import ALIAS_GROUPS, ArchRegistry
from valuekit.config import logging
from valuekit.constants import ENV_LOG_LEVEL, ENV_OS_ARCH

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def clean_valuekit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure developer environment variables do not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (ENV_LOG_LEVEL, ENV_OS_ARCH, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def isolated_arch_registry() -> Iterator[type[ArchRegistry]]:
    """Yield `ArchRegistry` with an empty cache, restoring built-ins afterwards.

    Tests may assign ``ArchRegistry._groups`` to exercise other tables.

    Yields:
        type[ArchRegistry]: The registry class.
    """
    ArchRegistry._mapping = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield ArchRegistry
    finally:
        ArchRegistry._groups = ALIAS_GROUPS  # pyright: ignore[reportPrivateUsage]
        ArchRegistry._mapping = None  # pyright: ignore[reportPrivateUsage]


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
