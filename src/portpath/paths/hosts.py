# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Host name validation for UNC paths.

Accepts IPv4 and IPv6 addresses and RFC 3986 "reg-name" hosts. Percent
encoded names are not accepted since they do not appear to be valid in UNC
paths.
"""

import re

IPV4_PATTERN = re.compile(r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})")
IPV4_MAX_OCTET_VALUE = 255

IPV6_MAX_HEX_GROUPS = 8
IPV6_HEX_GROUP_PATTERN = re.compile(r"[0-9a-fA-F]{1,4}")

REG_NAME_PART_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9-]*")


def is_ipv4_address(name: str) -> bool:
    """Check for a dotted-quad IPv4 address (no leading zeros, octets <= 255)."""
    match = IPV4_PATTERN.fullmatch(name)
    if not match:
        return False
    for segment in match.groups():
        if int(segment) > IPV4_MAX_OCTET_VALUE:
            return False
        if len(segment) > 1 and segment.startswith("0"):
            return False
    return True


def _split_groups(address: str) -> list[str]:
    groups = address.split(":")
    # trailing empty groups carry no information, the "::" suffix is re-added below
    while groups and groups[-1] == "":
        groups.pop()
    return groups


def is_ipv6_address(address: str) -> bool:
    """
    Check for an IPv6 address.

    At most one ``::`` compression marker is allowed, each group holds at
    most four hex digits, and the last group may be an IPv4 address which
    counts as two groups.
    """
    compressed = "::" in address
    if compressed and address.find("::") != address.rfind("::"):
        return False
    if (address.startswith(":") and not address.startswith("::")) or (
        address.endswith(":") and not address.endswith("::")
    ):
        return False

    groups = _split_groups(address)
    if compressed:
        if address.endswith("::"):
            groups.append("")
        elif address.startswith("::") and groups:
            groups.pop(0)

    if len(groups) > IPV6_MAX_HEX_GROUPS:
        return False

    valid_groups = 0
    empty_groups = 0  # consecutive
    for index, group in enumerate(groups):
        if not group:
            empty_groups += 1
            if empty_groups > 1:
                return False
        else:
            empty_groups = 0
            if index == len(groups) - 1 and "." in group:
                if not is_ipv4_address(group):
                    return False
                valid_groups += 2
                continue
            if not IPV6_HEX_GROUP_PATTERN.fullmatch(group):
                return False
        valid_groups += 1

    return valid_groups <= IPV6_MAX_HEX_GROUPS and (valid_groups >= IPV6_MAX_HEX_GROUPS or compressed)


def is_reg_name(name: str) -> bool:
    """Check for a dot-separated RFC 3986 reg-name; one trailing dot is legal."""
    parts = name.split(".")
    for index, part in enumerate(parts):
        if not part:
            # a trailing dot is fine, anything else is a ".." sequence
            return index == len(parts) - 1
        if not REG_NAME_PART_PATTERN.fullmatch(part):
            return False
    return True


def is_valid_host_name(name: str) -> bool:
    """Check whether ``name`` may appear as the host of a UNC path."""
    return is_ipv4_address(name) or is_ipv6_address(name) or is_reg_name(name)
