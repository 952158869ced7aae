import re
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

import config

TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


class FileAccessError(Exception):
    """The lease file could not be opened or read."""

    def __init__(self, path, reason, action="opening"):
        self.path = path
        self.reason = reason
        super().__init__(f"Error {action} file {path}: {reason}")


@dataclass
class LeaseRecord:
    expiry: datetime
    mac_address: str
    ip_address: str
    hostname: str
    client_id: str


@dataclass
class ParseResult:
    leases: List[LeaseRecord] = field(default_factory=list)
    skipped: int = 0


def _known(value):
    return config.UNKNOWN if value == "*" else value


def parse_line(line, strict=None):
    """
    Parse one lease line.

    returns: (record, None) on success, (None, reason) for a malformed line
    """
    if strict is None:
        strict = config.STRICT_FIELDS
    fields = line.split()

    if strict and len(fields) != 5:
        return None, f"Invalid number of fields ({len(fields)}), expected 5"
    if not strict and len(fields) not in (4, 5):
        return None, f"Invalid number of fields ({len(fields)}), expected 4 or 5"

    if not TIMESTAMP_RE.fullmatch(fields[0]):
        return None, f"Error parsing timestamp '{fields[0]}'"
    try:
        expiry = datetime.fromtimestamp(int(fields[0]))
    except (OverflowError, OSError, ValueError) as e:
        return None, f"Timestamp '{fields[0]}' out of range: {e}"

    client_id = fields[4] if len(fields) == 5 else config.UNKNOWN
    return LeaseRecord(
        expiry=expiry,
        mac_address=fields[1],
        ip_address=fields[2],
        hostname=_known(fields[3]),
        client_id=_known(client_id),
    ), None


def parse_leases(file_path, strict=None):
    """Parse a dnsmasq lease file, skipping malformed lines."""
    result = ParseResult()

    try:
        lease_file = open(file_path, encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(file_path, e.strerror or e) from e

    with lease_file:
        try:
            for line_no, line in enumerate(lease_file, start=1):
                line = line.rstrip("\r\n")
                lease, reason = parse_line(line, strict=strict)
                if lease is None:
                    logging.warning(f"Skipping line {line_no}: {reason}. Line: '{line}'")
                    result.skipped += 1
                    continue
                result.leases.append(lease)
        except OSError as e:
            raise FileAccessError(file_path, e.strerror or e, action="reading") from e

    logging.debug(f"Parsed {len(result.leases)} leases from {file_path}, skipped {result.skipped} lines")
    return result
