from ipaddress import IPv4Address, IPv6Address

import pytest

from ipcidr.parser import (
    InvalidCidr,
    InvalidComponent,
    InvalidIp,
    InvalidIpv4,
    InvalidIpv6,
    Ipv4CidrPrefixOverflow,
    Ipv4InvalidComponentSize,
    Ipv6CidrPrefixOverflow,
    Ipv6InvalidComponentSize,
    Ipv6MultipleZeroAbbrv,
    MissingCidr,
    MissingIp,
    NonAsciiCharacter,
    ParseError,
    UnexpectedCharacter,
    parse_ip,
)

IPV4_VALID = [
    ("127.0.0.1", IPv4Address("127.0.0.1")),
    ("0.0.0.0", IPv4Address("0.0.0.0")),
    ("255.255.255.255", IPv4Address("255.255.255.255")),
]


def _v6(*parts):
    value = 0
    for part in parts:
        value = (value << 16) | part
    return IPv6Address(value)


IPV6_VALID = [
    ("::1:2:3:4:5", _v6(0, 0, 0, 1, 2, 3, 4, 5)),
    ("0:0:0:1:2:3:4:5", _v6(0, 0, 0, 1, 2, 3, 4, 5)),
    ("1:2::3:4:5", _v6(1, 2, 0, 0, 0, 3, 4, 5)),
    ("1:2:0:0:0:3:4:5", _v6(1, 2, 0, 0, 0, 3, 4, 5)),
    ("1:2:3:4:5::", _v6(1, 2, 3, 4, 5, 0, 0, 0)),
    ("1:2:3:4:5:0:0:0", _v6(1, 2, 3, 4, 5, 0, 0, 0)),
    ("0:0:0:0:0:ffff:102:405", _v6(0, 0, 0, 0, 0, 0xFFFF, 0x102, 0x405)),
    ("::", _v6(0, 0, 0, 0, 0, 0, 0, 0)),
    ("::0", _v6(0, 0, 0, 0, 0, 0, 0, 0)),
    ("::1", _v6(0, 0, 0, 0, 0, 0, 0, 1)),
    ("0:0:0::1", _v6(0, 0, 0, 0, 0, 0, 0, 1)),
    ("ffff::1", _v6(0xFFFF, 0, 0, 0, 0, 0, 0, 1)),
    ("ffff:0:0:0:0:0:0:1", _v6(0xFFFF, 0, 0, 0, 0, 0, 0, 1)),
    ("2001:0db8:0a0b:12f0:0:0:0:1", _v6(0x2001, 0x0DB8, 0x0A0B, 0x12F0, 0, 0, 0, 1)),
    ("2001:db8:a0b:12f0::1", _v6(0x2001, 0x0DB8, 0x0A0B, 0x12F0, 0, 0, 0, 1)),
    ("::ffff:1:2:3:4", _v6(0, 0, 0, 0xFFFF, 1, 2, 3, 4)),
]

IPV4_INVALID = [
    ("", MissingIp()),
    ("-1.", UnexpectedCharacter("-", 0)),
    ("%1.", UnexpectedCharacter("%", 0)),
    ("0.0.0", Ipv4InvalidComponentSize(3)),
    ("127.0.0.1.5", Ipv4InvalidComponentSize(5)),
    ("1..", InvalidIpv4()),
    ("256.0.0.1", InvalidComponent("256")),
    ("1", InvalidIp()),
    ("1.1", Ipv4InvalidComponentSize(2)),
    ("1.f", InvalidComponent("f")),
    ("f.1", InvalidComponent("f")),
    ("127.0.0.1/33", Ipv4CidrPrefixOverflow(33)),
    ("127.1.0.900", InvalidComponent("900")),
]

IPV6_INVALID = [
    ("", MissingIp()),
    ("-f:", UnexpectedCharacter("-", 0)),
    ("%f::", UnexpectedCharacter("%", 0)),
    ("0:0:0", Ipv6InvalidComponentSize(3)),
    ("1:2:3:4:5:6:7:8:9", Ipv6InvalidComponentSize(9)),
    ("0:::", Ipv6MultipleZeroAbbrv()),
    ("1ffff::", InvalidComponent("1ffff")),
    ("f", InvalidIp()),
    ("f:f", Ipv6InvalidComponentSize(2)),
    ("1:f", Ipv6InvalidComponentSize(2)),
    ("f:1", Ipv6InvalidComponentSize(2)),
    ("ffff::/129", Ipv6CidrPrefixOverflow(129)),
]


@pytest.mark.parametrize("prefix,case", list(enumerate(IPV4_VALID)))
def test_parse_ipv4(prefix, case):
    text, expected = case
    assert parse_ip(text) == (expected, None)
    assert parse_ip(f"{text}/{prefix}") == (expected, prefix)


@pytest.mark.parametrize("prefix,case", list(enumerate(IPV6_VALID)))
def test_parse_ipv6(prefix, case):
    text, expected = case
    assert parse_ip(text) == (expected, None)
    assert parse_ip(f"{text}/{prefix}") == (expected, prefix)


@pytest.mark.parametrize("text,expected", IPV4_INVALID + IPV6_INVALID)
def test_parse_errors(text, expected):
    with pytest.raises(ParseError) as info:
        parse_ip(text)
    assert info.value == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.2.3.4/", MissingCidr()),
        ("1.2.3.4/abc", InvalidCidr("abc")),
        ("1.2.3.4/256", InvalidCidr("256")),
        ("/5", MissingIp()),
        ("1.2:3", InvalidIpv4()),
        ("1:2.3", InvalidIpv6()),
        (":1", InvalidIpv6()),
        ("1:2:3:4:5:6:7:", InvalidIpv6()),
        ("1.2.3.", InvalidIpv4()),
        ("1.2.3.4 ", UnexpectedCharacter(" ", 7)),
        ("1\u00e9", UnexpectedCharacter("\u00c3", 1)),
        ("::/200", Ipv6CidrPrefixOverflow(200)),
    ],
)
def test_parse_other_errors(text, expected):
    with pytest.raises(ParseError) as info:
        parse_ip(text)
    assert info.value == expected


def test_full_prefix_bounds():
    assert parse_ip("10.0.0.0/32") == (IPv4Address("10.0.0.0"), 32)
    assert parse_ip("::/128") == (IPv6Address(0), 128)


def test_leading_zero_components():
    assert parse_ip("001.002.003.004")[0] == IPv4Address("1.2.3.4")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_ip("nope")


@pytest.mark.parametrize(
    "error,message",
    [
        (InvalidIp(), "Input is not valid IP"),
        (InvalidIpv4(), "Address is not valid IPv4"),
        (InvalidIpv6(), "Address is not valid IPv6"),
        (Ipv4InvalidComponentSize(3), "IPv4 Address has '3' components but expected 4"),
        (Ipv6InvalidComponentSize(9), "IPv6 Address has '9' components but expected 8"),
        (Ipv6MultipleZeroAbbrv(), "IPv6 contains more than 1 zero abbreviation"),
        (UnexpectedCharacter("-", 0), "Encountered unexpected character '-' at idx=0"),
        (InvalidCidr("x"), "Invalid Cidr prefix: x"),
        (InvalidComponent("256"), "Invalid address component: 256"),
        (NonAsciiCharacter(4), "Encountered non-ASCII character at idx=4"),
        (MissingIp(), "Address is not specified"),
        (MissingCidr(), "Prefix is not specified"),
        (Ipv4CidrPrefixOverflow(33), "Prefix '33' is greater than 32"),
        (Ipv6CidrPrefixOverflow(129), "Prefix '129' is greater than 128"),
    ],
)
def test_error_messages(error, message):
    assert str(error) == message


def test_error_equality_distinguishes_payload_and_type():
    assert InvalidComponent("1") == InvalidComponent("1")
    assert not InvalidComponent("1") == InvalidComponent("2")
    assert not InvalidCidr("1") == InvalidComponent("1")
    assert len({MissingIp(), MissingIp(), MissingCidr()}) == 2