import sys
import logging
import argparse

import config
from dhcp_parser import parse_leases, FileAccessError
from render import TableRenderer


def setup_logging(level=logging.INFO):
    # Remove all handlers associated with the root logger.
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format=config.LOG_FORMAT
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="dnsmasq-leases",
        description="Print the dnsmasq lease file as a table. "
                    f"Set {config.LEASES_FILE_ENV} to override {config.LEASES_FILE}."
    )
    parser.parse_args(argv)

    setup_logging()
    leases_file = config.resolve_leases_file()

    try:
        result = parse_leases(leases_file)
    except FileAccessError as e:
        logging.error(str(e))
        return 1

    TableRenderer().render(result.leases, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
