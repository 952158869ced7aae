import errno

import pytest

import dhcp_parser


class FailingLeaseFile:
    """Yields one good line, then fails like a disk I/O error."""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        yield "1700000000 aa:bb:cc:dd:ee:ff 192.168.1.50 myhost *\n"
        raise OSError(errno.EIO, "Input/output error")


@pytest.fixture
def failing_read(monkeypatch):
    monkeypatch.setattr(dhcp_parser, "open", lambda *args, **kwargs: FailingLeaseFile(), raising=False)
