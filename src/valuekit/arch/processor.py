# topmark:header:start
#
#   project      : ValueKit
#   file         : processor.py
#   file_relpath : src/valuekit/arch/processor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processor descriptor: bit-width × instruction-set family.

A [`ProcessorDescriptor`][valuekit.arch.processor.ProcessorDescriptor] is an
immutable value. Descriptors are authored once in the architecture alias table
and shared by every alias that maps to them.
"""

from __future__ import annotations

from dataclasses import dataclass

from valuekit.core.enum_mixins import KeyedStrEnum


class Bitness(KeyedStrEnum):
    """Processor address width.

    Attributes:
        BIT_32: 32-bit processors.
        BIT_64: 64-bit processors.
        UNKNOWN: Width could not be determined.
    """

    BIT_32 = ("32", "32-bit", ("32bit",))
    BIT_64 = ("64", "64-bit", ("64bit",))
    UNKNOWN = ("unknown", "Unknown")


class Family(KeyedStrEnum):
    """Instruction-set family.

    Attributes:
        X86: Intel/AMD x86 (both 32- and 64-bit).
        IA_64: Intel Itanium.
        PPC: PowerPC / POWER.
        AARCH_64: ARM 64-bit.
        RISC_V: RISC-V.
        UNKNOWN: Family could not be determined.
    """

    X86 = ("x86", "x86")
    IA_64 = ("ia64", "IA-64", ("itanium",))
    PPC = ("ppc", "PPC", ("power", "powerpc"))
    AARCH_64 = ("aarch64", "AArch64", ("arm64",))
    RISC_V = ("riscv", "RISC-V")
    UNKNOWN = ("unknown", "Unknown")


@dataclass(frozen=True)
class ProcessorDescriptor:
    """Immutable (bitness, family) pair describing a processor class.

    Equality and hashing are structural, so two descriptors built from the same
    members are interchangeable.

    Attributes:
        bitness (Bitness): Address width.
        family (Family): Instruction-set family.
    """

    bitness: Bitness
    family: Family

    @property
    def is_32_bit(self) -> bool:
        """True for 32-bit processors."""
        return self.bitness is Bitness.BIT_32

    @property
    def is_64_bit(self) -> bool:
        """True for 64-bit processors."""
        return self.bitness is Bitness.BIT_64

    @property
    def is_x86(self) -> bool:
        """True for the x86 family."""
        return self.family is Family.X86

    @property
    def is_ia64(self) -> bool:
        """True for the IA-64 family."""
        return self.family is Family.IA_64

    @property
    def is_ppc(self) -> bool:
        """True for the PowerPC family."""
        return self.family is Family.PPC

    @property
    def is_aarch64(self) -> bool:
        """True for the AArch64 family."""
        return self.family is Family.AARCH_64

    @property
    def is_riscv(self) -> bool:
        """True for the RISC-V family."""
        return self.family is Family.RISC_V

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``"x86 64-bit"``."""
        return f"{self.family.label} {self.bitness.label}"

    def to_dict(self) -> dict[str, str]:
        """Return the machine keys of this descriptor (JSON friendly)."""
        return {
            "bitness": self.bitness.key,
            "family": self.family.key,
            "label": self.label,
        }

    def __str__(self) -> str:
        return self.label
