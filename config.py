import os
import logging

LEASES_FILE_ENV = "DNSMASQ_LEASES"
LEASES_FILE = "/var/lib/misc/dnsmasq.leases"

WEB_HOST = "0.0.0.0"
WEB_PORT = 8080

# Placeholder for '*' hostnames and missing client IDs
UNKNOWN = "N/A"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# True: exactly 5 fields per line. False: client ID may be omitted.
STRICT_FIELDS = False

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def resolve_leases_file(environ=None):
    """Return the lease file path, preferring the environment override."""
    if environ is None:
        environ = os.environ

    path = environ.get(LEASES_FILE_ENV, "")
    if not path:
        logging.info(f"Environment variable {LEASES_FILE_ENV} not set, using default path: {LEASES_FILE}")
        return LEASES_FILE

    logging.info(f"Using lease file path from environment variable {LEASES_FILE_ENV}: {path}")
    return path
