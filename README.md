# ipcidr

Parse IPv4 and IPv6 addresses with an optional CIDR prefix, and work with
the address blocks that result. Addresses are the standard library's
`ipaddress.IPv4Address` and `ipaddress.IPv6Address`. The package has no
dependencies.

## Installation

    pip install ipcidr

## Parsing addresses

`ipcidr.parser.parse_ip` reads an address and an optional `/prefix`. It
returns a tuple of the address and the prefix. The prefix is `None` if the
text has no prefix.

```python
from ipcidr.parser import parse_ip

parse_ip("127.0.0.1")        # (IPv4Address('127.0.0.1'), None)
parse_ip("2001:db8::1/64")   # (IPv6Address('2001:db8::1'), 64)
parse_ip("::")               # (IPv6Address('::'), None)
```

IPv4 addresses must have exactly four decimal components, each from 0 to 255.
IPv6 addresses must have eight hexadecimal components of up to `ffff`. A
single `::` may stand for a run of zero components. The parser does not
accept an IPv4 tail inside an IPv6 address, such as `::ffff:1.2.3.4`. It
does not accept a zone suffix, such as `fe80::1%eth0`, either. The prefix may
be at most 32 for IPv4 and at most 128 for IPv6.

### Errors

Bad input raises a subclass of `ParseError`. `ParseError` is itself a
`ValueError`. Each subclass names what went wrong, and its message says so
in words:

- `MissingIp` means the text is empty or has nothing before the `/`.
- `MissingCidr` means nothing follows the `/`.
- `InvalidIp` means the text is a bare number with no separator.
- `InvalidIpv4` and `InvalidIpv6` mean the separators are misplaced.
- `InvalidComponent(component)` means a component is not a valid number for
  its family.
- `InvalidCidr(cidr)` means the prefix is not a valid number.
- `UnexpectedCharacter(char, position)` means a character that may not appear
  in an address was found.
- `Ipv4InvalidComponentSize(size)` and `Ipv6InvalidComponentSize(size)` mean
  the address has the wrong number of components.
- `Ipv6MultipleZeroAbbrv` means there is more than one `::`.
- `Ipv4CidrPrefixOverflow(prefix)` and `Ipv6CidrPrefixOverflow(prefix)` mean
  the prefix is too large for the address family.

`NonAsciiCharacter(position)` is defined but never raised by `parse_ip`.
Characters outside ASCII are reported as `UnexpectedCharacter`.

Two errors are equal when they are of the same class and carry the same
values:

```python
from ipcidr.parser import parse_ip, InvalidComponent, ParseError

try:
    parse_ip("256.0.0.1")
except ParseError as error:
    assert error == InvalidComponent("256")
    print(error)             # Invalid address component: 256
```

The module also exports `IPV4_BITS` (32) and `IPV6_BITS` (128).

## CIDR blocks

`ipcidr.cidr.Cidr` is a frozen dataclass. It holds an `addr` and a `prefix`.
Creating one with a prefix that is negative, or larger than the address
width, raises `ValueError`.

`parse_cidr` turns text into a `Cidr`. If the text has no prefix, the block
holds that single address. It raises the same `ParseError` subclasses as
`parse_ip`.

```python
from ipcidr.cidr import Cidr, parse_cidr

block = parse_cidr("192.168.1.17/24")
str(block)                   # '192.168.1.17/24'
block.network_addr()         # IPv4Address('192.168.1.0')
block.broadcast_addr()       # IPv4Address('192.168.1.255')
block.size()                 # 256
block.get(5)                 # IPv4Address('192.168.1.5')
block.get(256)               # None
```

### Membership

`contains` tests whether an address is inside the block. The `in` operator
gives the same answer. An address of the other family is never inside the
block.

```python
from ipaddress import ip_address

block.contains(ip_address("192.168.1.200"))   # True
ip_address("192.168.2.1") in block            # False
block.contains(ip_address("::1"))             # False
```

### Indexing

`get(idx)` counts from the network address. It returns `None` once `idx`
reaches `size()`.

`get_unchecked(idx)` does not check `idx` against the size. The result wraps
around the whole address space:

```python
edge = Cidr(ip_address("255.255.255.30"), 31)
edge.get_unchecked(226)      # IPv4Address('0.0.0.0')
```

Both methods reduce `idx` to the address width before they use it. Both
raise `ValueError` for a negative index.

### Other members

- `Cidr.single(addr)` makes a block that holds only `addr`.
- `bits` is the address width: 32 or 128.
- `size()` for prefix `/0` is one less than the whole address space, so the
  last address of the space is not counted.
- Blocks can be ordered. IPv4 blocks sort before IPv6 blocks. Within a family,
  blocks sort by prefix, then by address.

### Helper functions

The module-level helpers do the same arithmetic on bare values:

- `mask(prefix, bits)` returns the network mask as an integer.
- `network_addr(addr, prefix)` returns the lowest address of the block.
- `broadcast_addr(addr, prefix)` returns the highest address of the block.
- `block_size(prefix, bits)` returns the number of addresses in the block.

## Scope

This is a library only. It has no command-line tool. It does not split,
merge or summarise blocks, and it does not iterate over subnets.

## Running the tests

    pip install "ipcidr[test]"
    pytest