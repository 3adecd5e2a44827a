"""Parsing of IPv4/IPv6 addresses with an optional CIDR prefix."""

from __future__ import annotations

from enum import Enum, auto
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Tuple, Union

IPV4_BITS = 32
IPV6_BITS = 128

IPAddress = Union[IPv4Address, IPv6Address]

_IPV4_LEN = 4
_IPV6_LEN = 8
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DEC_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Base class of all errors raised while parsing an address."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidComponent(ParseError):
    """An address component is not a valid number."""

    def __init__(self, component: str) -> None:
        super().__init__(component)
        self.component = component

    def __str__(self) -> str:
        return f"Invalid address component: {self.component}"


class InvalidCidr(ParseError):
    """The CIDR prefix is not a valid number."""

    def __init__(self, cidr: str) -> None:
        super().__init__(cidr)
        self.cidr = cidr

    def __str__(self) -> str:
        return f"Invalid Cidr prefix: {self.cidr}"


class UnexpectedCharacter(ParseError):
    """An unexpected character was met at the given position."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(char, position)
        self.char = char
        self.position = position

    def __str__(self) -> str:
        return f"Encountered unexpected character '{self.char}' at idx={self.position}"


class InvalidIp(ParseError):
    """The input is not a valid IP address."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Input is not valid IP"


class InvalidIpv4(ParseError):
    """The input is not a valid IPv4 address."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Address is not valid IPv4"


class Ipv4InvalidComponentSize(ParseError):
    """An IPv4 address does not have exactly 4 components."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.size = size

    def __str__(self) -> str:
        return f"IPv4 Address has '{self.size}' components but expected 4"


class InvalidIpv6(ParseError):
    """The input is not a valid IPv6 address."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Address is not valid IPv6"


class Ipv6InvalidComponentSize(ParseError):
    """An IPv6 address does not have exactly 8 components."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.size = size

    def __str__(self) -> str:
        return f"IPv6 Address has '{self.size}' components but expected 8"


class Ipv6MultipleZeroAbbrv(ParseError):
    """An IPv6 address holds more than one '::' abbreviation."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "IPv6 contains more than 1 zero abbreviation"


class NonAsciiCharacter(ParseError):
    """A non-ASCII character was met at the given position."""

    def __init__(self, position: int) -> None:
        super().__init__(position)
        self.position = position

    def __str__(self) -> str:
        return f"Encountered non-ASCII character at idx={self.position}"


class MissingIp(ParseError):
    """No address was given."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Address is not specified"


class MissingCidr(ParseError):
    """A '/' was given without a prefix after it."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Prefix is not specified"


class Ipv4CidrPrefixOverflow(ParseError):
    """The prefix of an IPv4 block is greater than 32."""

    def __init__(self, prefix: int) -> None:
        super().__init__(prefix)
        self.prefix = prefix

    def __str__(self) -> str:
        return f"Prefix '{self.prefix}' is greater than 32"


class Ipv6CidrPrefixOverflow(ParseError):
    """The prefix of an IPv6 block is greater than 128."""

    def __init__(self, prefix: int) -> None:
        super().__init__(prefix)
        self.prefix = prefix

    def __str__(self) -> str:
        return f"Prefix '{self.prefix}' is greater than 128"


class _Family(Enum):
    UNKNOWN = auto()
    V4 = auto()
    V6 = auto()


class _State(Enum):
    INITIAL = auto()
    DIGIT = auto()
    V4_SEP = auto()
    V6_SEP = auto()


def _parse_unsigned(text: str, base_digits: frozenset, radix: int, limit: int) -> Optional[int]:
    """Parse an unsigned integer the strict way: optional '+', digits only, within limit."""
    if text.startswith("+"):
        text = text[1:]
    if not text or any(ch not in base_digits for ch in text):
        return None
    value = int(text, radix)
    return value if value <= limit else None


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.state = _State.INITIAL
        self.family = _Family.UNKNOWN
        self.zero_skip = False
        self.sep_initial = False
        self.components: list[int] = []
        self.zero_component_start = 0
        self.start_digit_position = 0

    def _current_component(self, sep_pos: int) -> str:
        return self.text[self.start_digit_position:max(sep_pos, self.start_digit_position)]

    def _extract_v4_component(self, sep_pos: int) -> None:
        text = self._current_component(sep_pos)
        if len(self.components) >= _IPV4_LEN:
            raise Ipv4InvalidComponentSize(len(self.components) + 1)
        value = _parse_unsigned(text, _DEC_DIGITS, 10, 0xFF)
        if value is None:
            raise InvalidComponent(text)
        self.components.append(value)
        self.start_digit_position = 0

    def _extract_v6_component(self, sep_pos: int) -> None:
        text = self._current_component(sep_pos)
        if len(self.components) >= _IPV6_LEN:
            raise Ipv6InvalidComponentSize(len(self.components) + 1)
        value = _parse_unsigned(text, _HEX_DIGITS, 16, 0xFFFF)
        if value is None:
            raise InvalidComponent(text)
        self.components.append(value)
        self.start_digit_position = 0

    def _read_ip_at_last(self, sep_pos: int) -> IPAddress:
        if self.family is _Family.V4:
            self._extract_v4_component(sep_pos)
            if len(self.components) != _IPV4_LEN:
                raise Ipv4InvalidComponentSize(len(self.components))
            return IPv4Address(bytes(self.components))
        if self.family is _Family.V6:
            self._extract_v6_component(sep_pos)
            return self._read_ipv6()
        if self.state is _State.INITIAL:
            raise MissingIp()
        raise InvalidIp()

    def _read_ipv6(self) -> IPv6Address:
        size = len(self.components)
        if size > _IPV6_LEN:
            raise InvalidIpv6()
        if size < _IPV6_LEN:
            if not self.zero_skip:
                raise Ipv6InvalidComponentSize(size)
            start = self.zero_component_start
            self.components[start:start] = [0] * (_IPV6_LEN - size)
        value = 0
        for component in self.components:
            value = (value << 16) | component
        return IPv6Address(value)

    def _on_digit(self, pos: int) -> None:
        if self.state is _State.DIGIT:
            return
        if self.state is _State.V6_SEP and self.sep_initial:
            raise InvalidIpv6()
        self.state = _State.DIGIT
        self.start_digit_position = pos

    def _on_v4_sep(self, pos: int) -> None:
        if self.state is not _State.DIGIT:
            raise InvalidIpv4()
        if self.family is _Family.V6:
            raise InvalidIpv6()
        self.family = _Family.V4
        self.state = _State.V4_SEP
        self._extract_v4_component(pos)

    def _on_v6_sep(self, pos: int) -> None:
        if self.state is _State.DIGIT:
            if self.family is _Family.V4:
                raise InvalidIpv4()
            self.family = _Family.V6
            self.state = _State.V6_SEP
            self._extract_v6_component(pos)
        elif self.state is _State.V6_SEP:
            if self.zero_skip:
                raise Ipv6MultipleZeroAbbrv()
            self.sep_initial = False
            self.zero_skip = True
            self.zero_component_start = len(self.components)
            self.family = _Family.V6
        elif self.state is _State.INITIAL:
            self.sep_initial = True
            self.state = _State.V6_SEP
        else:
            raise InvalidIpv4()

    def _on_ip_end(self, last_pos: int) -> IPAddress:
        if self.state is _State.DIGIT:
            return self._read_ip_at_last(last_pos)
        if self.state is _State.V4_SEP:
            raise InvalidIpv4()
        if self.state is _State.V6_SEP:
            if not self.zero_skip:
                raise InvalidIpv6()
            if not self.components:
                return IPv6Address(0)
            return self._read_ipv6()
        raise MissingIp()

    def _on_cidr_sep(self, pos: int) -> int:
        digit_pos = pos + 1
        if digit_pos >= len(self.text):
            raise MissingCidr()
        text = self.text[digit_pos:]
        prefix = _parse_unsigned(text, _DEC_DIGITS, 10, 0xFF)
        if prefix is None:
            raise InvalidCidr(text)
        if self.family is _Family.V4:
            if prefix > IPV4_BITS:
                raise Ipv4CidrPrefixOverflow(prefix)
            return prefix
        if self.family is _Family.V6:
            if prefix > IPV6_BITS:
                raise Ipv6CidrPrefixOverflow(prefix)
            return prefix
        raise InvalidCidr(text)

    def parse(self) -> Tuple[IPAddress, Optional[int]]:
        for idx, ch in enumerate(self.text):
            if ch in _HEX_DIGITS:
                self._on_digit(idx)
            elif ch == ".":
                self._on_v4_sep(idx)
            elif ch == ":":
                self._on_v6_sep(idx)
            elif ch == "/":
                ip = self._on_ip_end(idx)
                return ip, self._on_cidr_sep(idx)
            elif ch.isascii():
                raise UnexpectedCharacter(ch, idx)
            else:
                # Reported as the leading byte of its UTF-8 encoding.
                raise UnexpectedCharacter(chr(ch.encode("utf-8")[0]), idx)
        return self._on_ip_end(len(self.text)), None


def parse_ip(text: str) -> Tuple[IPAddress, Optional[int]]:
    """Parse ``text`` into an IP address and an optional CIDR prefix.

    Raises a :class:`ParseError` subclass if the input is not valid.
    """
    return _Parser(text).parse()