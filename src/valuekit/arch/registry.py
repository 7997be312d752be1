# topmark:header:start
#
#   project      : ValueKit
#   file         : registry.py
#   file_relpath : src/valuekit/arch/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of architecture aliases to processor descriptors.

The registry is built from the fixed [`ALIAS_GROUPS`][valuekit.arch.registry.ALIAS_GROUPS]
table on first use and cached for the lifetime of the process.

Notes:
    * Construction goes through the pure
      [`build_alias_map`][valuekit.arch.registry.build_alias_map]; a duplicate alias
      raises [`ConfigurationIntegrityError`][valuekit.core.errors.ConfigurationIntegrityError]
      and nothing is cached.
    * Initialization is guarded by an `RLock`. Once published, the mapping is a
      `MappingProxyType` and lookups read it without locking.
    * Lookups are exact and case-sensitive. Aliases in the table are lower-case.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from valuekit.arch.host import host_os_arch
from valuekit.arch.processor import Bitness, Family, ProcessorDescriptor
from valuekit.config.logging import ValuekitLogger, get_logger
from valuekit.core.errors import ConfigurationIntegrityError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping

logger: ValuekitLogger = get_logger(__name__)


@dataclass(frozen=True)
class AliasGroup:
    """One row of the alias table: a descriptor and the names that map to it."""

    processor: ProcessorDescriptor
    aliases: tuple[str, ...]


X86_32: Final = ProcessorDescriptor(Bitness.BIT_32, Family.X86)
X86_64: Final = ProcessorDescriptor(Bitness.BIT_64, Family.X86)
IA64_32: Final = ProcessorDescriptor(Bitness.BIT_32, Family.IA_64)
IA64_64: Final = ProcessorDescriptor(Bitness.BIT_64, Family.IA_64)
PPC_32: Final = ProcessorDescriptor(Bitness.BIT_32, Family.PPC)
PPC_64: Final = ProcessorDescriptor(Bitness.BIT_64, Family.PPC)
AARCH64_64: Final = ProcessorDescriptor(Bitness.BIT_64, Family.AARCH_64)
RISCV_32: Final = ProcessorDescriptor(Bitness.BIT_32, Family.RISC_V)
RISCV_64: Final = ProcessorDescriptor(Bitness.BIT_64, Family.RISC_V)

ALIAS_GROUPS: Final[tuple[AliasGroup, ...]] = (
    AliasGroup(X86_32, ("x86", "i386", "i486", "i586", "i686", "pentium")),
    AliasGroup(X86_64, ("x86_64", "amd64", "em64t", "universal")),
    AliasGroup(IA64_32, ("ia64_32", "ia64n")),
    AliasGroup(IA64_64, ("ia64", "ia64w")),
    AliasGroup(PPC_32, ("ppc", "power", "powerpc", "power_pc", "power_rs")),
    AliasGroup(PPC_64, ("ppc64", "power64", "powerpc64", "power_pc64", "power_rs64")),
    AliasGroup(AARCH64_64, ("aarch64",)),
    AliasGroup(RISCV_32, ("riscv32",)),
    AliasGroup(RISCV_64, ("riscv64",)),
)


def build_alias_map(groups: Iterable[AliasGroup]) -> dict[str, ProcessorDescriptor]:
    """Build the alias -> descriptor mapping from ``groups``.

    Args:
        groups (Iterable[AliasGroup]): Table rows, in authoring order.

    Returns:
        dict[str, ProcessorDescriptor]: One entry per alias.

    Raises:
        ConfigurationIntegrityError: If an alias appears more than once, even
            when both occurrences name the same descriptor.
    """
    registry: dict[str, ProcessorDescriptor] = {}
    for group in groups:
        for alias in group.aliases:
            existing: ProcessorDescriptor | None = registry.get(alias)
            if existing is not None:
                raise ConfigurationIntegrityError(
                    f"Alias {alias!r} already exists in processor map "
                    f"(registered for {existing}, duplicated for {group.processor})"
                )
            registry[alias] = group.processor
    return registry


class ArchRegistry:
    """Process-wide, read-only view of the architecture alias table.

    All methods are class methods; the registry has no instances. The first
    call to any of them builds the mapping (see `initialize()`).
    """

    _lock = RLock()
    _groups: tuple[AliasGroup, ...] = ALIAS_GROUPS
    _mapping: Mapping[str, ProcessorDescriptor] | None = None

    @classmethod
    def initialize(cls) -> Mapping[str, ProcessorDescriptor]:
        """Build the alias mapping once and return it.

        Idempotent: later calls return the cached mapping.

        Returns:
            Mapping[str, ProcessorDescriptor]: Read-only alias mapping.

        Raises:
            ConfigurationIntegrityError: If the alias table contains a duplicate.
        """
        mapping = cls._mapping
        if mapping is not None:
            return mapping
        with cls._lock:
            if cls._mapping is None:
                built: dict[str, ProcessorDescriptor] = build_alias_map(cls._groups)
                cls._mapping = MappingProxyType(built)
                logger.debug(
                    "Loaded %d architecture aliases in %d groups",
                    len(built),
                    len(cls._groups),
                )
            return cls._mapping

    @classmethod
    def lookup(cls, name: str | None) -> ProcessorDescriptor | None:
        """Return the descriptor registered for ``name``.

        Args:
            name (str | None): Architecture alias, matched exactly (case-sensitive).

        Returns:
            ProcessorDescriptor | None: The descriptor, or None when ``name`` is
            None or not a registered alias.
        """
        if name is None:
            return None
        processor: ProcessorDescriptor | None = cls.initialize().get(name)
        logger.trace("lookup(%r) -> %s", name, processor)
        return processor

    @classmethod
    def lookup_default(
        cls,
        provider: Callable[[], str | None] | None = None,
    ) -> ProcessorDescriptor | None:
        """Return the descriptor for the host architecture.

        Args:
            provider (Callable[[], str | None] | None): Source of the host
                identifier. Defaults to
                [`host_os_arch`][valuekit.arch.host.host_os_arch].

        Returns:
            ProcessorDescriptor | None: The descriptor, or None if the host
            identifier is unknown to the table.
        """
        get_arch: Callable[[], str | None] = provider or host_os_arch
        return cls.lookup(get_arch())

    @classmethod
    def as_mapping(cls) -> Mapping[str, ProcessorDescriptor]:
        """Return the read-only alias mapping.

        Returns:
            Mapping[str, ProcessorDescriptor]: Alias -> descriptor.
        """
        return cls.initialize()

    @classmethod
    def aliases(cls) -> tuple[str, ...]:
        """Return all registered aliases (sorted)."""
        return tuple(sorted(cls.initialize()))

    @classmethod
    def aliases_for(cls, processor: ProcessorDescriptor) -> tuple[str, ...]:
        """Return the aliases registered for ``processor`` in table order."""
        return tuple(
            alias for alias, candidate in cls.initialize().items() if candidate == processor
        )

    @classmethod
    def iter_groups(cls, family: Family | None = None) -> Iterator[AliasGroup]:
        """Iterate over the alias table.

        Args:
            family (Family | None): If given, only yield groups of this family.

        Yields:
            AliasGroup: Table rows in authoring order.
        """
        cls.initialize()
        for group in cls._groups:
            if family is None or group.processor.family is family:
                yield group
