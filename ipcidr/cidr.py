"""CIDR blocks over IPv4 and IPv6 addresses."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Union

from .parser import IPV4_BITS, IPV6_BITS, parse_ip

IPAddress = Union[IPv4Address, IPv6Address]


def _bits_of(addr: IPAddress) -> int:
    if isinstance(addr, IPv4Address):
        return IPV4_BITS
    if isinstance(addr, IPv6Address):
        return IPV6_BITS
    raise TypeError(f"expected an IPv4Address or IPv6Address, got {type(addr).__name__}")


def _all_ones(bits: int) -> int:
    return (1 << bits) - 1


def mask(prefix: int, bits: int) -> int:
    """Return the network mask for ``prefix`` in an address of ``bits`` bits."""
    if prefix == 0:
        return 0
    full = _all_ones(bits)
    return (full << max(bits - prefix, 0)) & full


def network_addr(addr: IPAddress, prefix: int) -> IPAddress:
    """Return the lowest address of the block ``addr/prefix``."""
    bits = _bits_of(addr)
    return type(addr)(int(addr) & mask(prefix, bits))


def broadcast_addr(addr: IPAddress, prefix: int) -> IPAddress:
    """Return the highest address of the block ``addr/prefix``."""
    bits = _bits_of(addr)
    inverted = ~mask(prefix, bits) & _all_ones(bits)
    return type(addr)(int(addr) | inverted)


def block_size(prefix: int, bits: int) -> int:
    """Return the number of addresses in a block of ``prefix``.

    A zero prefix yields the largest value the address width can hold, so the
    very last address of the space is not counted.
    """
    if prefix == 0:
        return _all_ones(bits)
    return 1 << max(bits - prefix, 0)


@total_ordering
@dataclass(frozen=True, eq=True)
class Cidr:
    """A CIDR block: an address together with a prefix length."""

    addr: IPAddress
    prefix: int

    def __post_init__(self) -> None:
        bits = _bits_of(self.addr)
        if not isinstance(self.prefix, int) or self.prefix < 0:
            raise ValueError(f"invalid prefix {self.prefix!r}")
        if self.prefix > bits:
            raise ValueError(f"prefix {self.prefix} is greater than {bits}")

    @classmethod
    def single(cls, addr: IPAddress) -> "Cidr":
        """Return the block holding ``addr`` alone."""
        return cls(addr, _bits_of(addr))

    @property
    def bits(self) -> int:
        return _bits_of(self.addr)

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.addr.version, self.prefix, int(self.addr))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cidr):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.addr}/{self.prefix}"

    def network_addr(self) -> IPAddress:
        """Return the lowest address within the block."""
        return network_addr(self.addr, self.prefix)

    def broadcast_addr(self) -> IPAddress:
        """Return the highest address within the block."""
        return broadcast_addr(self.addr, self.prefix)

    def contains(self, addr: IPAddress) -> bool:
        """Tell whether ``addr`` lies within the block."""
        if type(addr) is not type(self.addr):
            return False
        return (int(addr) & mask(self.prefix, self.bits)) == int(self.network_addr())

    def __contains__(self, addr: object) -> bool:
        return isinstance(addr, (IPv4Address, IPv6Address)) and self.contains(addr)

    def size(self) -> int:
        """Return the number of addresses within the block."""
        return block_size(self.prefix, self.bits)

    def _truncate(self, idx: int) -> int:
        if idx < 0:
            raise ValueError(f"index must not be negative, got {idx}")
        return idx & _all_ones(self.bits)

    def get(self, idx: int) -> Optional[IPAddress]:
        """Return the address at ``idx`` within the block, or None if out of range."""
        idx = self._truncate(idx)
        if idx >= self.size():
            return None
        return self._at(idx)

    def get_unchecked(self, idx: int) -> IPAddress:
        """Return the address at ``idx`` from the network address, wrapping around."""
        return self._at(self._truncate(idx))

    def _at(self, idx: int) -> IPAddress:
        net = int(self.network_addr())
        return type(self.addr)((net + idx) & _all_ones(self.bits))


def parse_cidr(text: str) -> Cidr:
    """Parse ``text`` into a :class:`Cidr`.

    Without a prefix the block holds the single address. Raises a
    :class:`~ipcidr.parser.ParseError` subclass on invalid input.
    """
    addr, prefix = parse_ip(text)
    if prefix is None:
        return Cidr.single(addr)
    return Cidr(addr, prefix)