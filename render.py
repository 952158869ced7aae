from abc import ABC, abstractmethod
from datetime import datetime

from jinja2 import Environment

import config

COLUMNS = ("Expiry Time", "MAC Address", "IP Address", "Hostname", "Client ID")
NO_ENTRIES_MESSAGE = "No lease entries found or file is empty."
NO_LEASES_ROW = "No active leases"

HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>DHCP Leases</title>
<style>
body { font-family: sans-serif; margin: 2em; }
table { border-collapse: collapse; }
th, td { border: 1px solid #ccc; padding: 4px 10px; text-align: left; }
th { background: #eee; }
footer { margin-top: 1em; color: #666; font-size: small; }
</style>
</head>
<body>
<h1>DHCP Leases</h1>
<table>
<thead>
<tr>{% for column in columns %}<th>{{ column }}</th>{% endfor %}</tr>
</thead>
<tbody>
{% for lease in leases %}
<tr><td>{{ lease.expiry | expiry }}</td><td>{{ lease.mac_address }}</td><td>{{ lease.ip_address }}</td><td>{{ lease.hostname }}</td><td>{{ lease.client_id }}</td></tr>
{% else %}
<tr><td colspan="{{ columns | length }}">{{ no_leases }}</td></tr>
{% endfor %}
</tbody>
</table>
<footer>Source: {{ source_path }} &middot; Rendered at {{ rendered_at }}</footer>
</body>
</html>
"""


def format_expiry(dt):
    return dt.strftime(config.TIME_FORMAT)


def lease_row(lease):
    return (
        format_expiry(lease.expiry),
        lease.mac_address,
        lease.ip_address,
        lease.hostname,
        lease.client_id,
    )


class LeaseRenderer(ABC):
    """Writes a sequence of LeaseRecord to a text stream."""

    @abstractmethod
    def render(self, leases, out):
        pass


class TableRenderer(LeaseRenderer):
    """Aligned plain text table, one row per lease."""

    def __init__(self, padding=2):
        self.padding = padding

    def render(self, leases, out):
        # The message replaces the whole table, header rows included
        if not leases:
            print(NO_ENTRIES_MESSAGE, file=out)
            return

        rows = [COLUMNS, tuple("-" * len(c) for c in COLUMNS)]
        rows.extend(lease_row(lease) for lease in leases)

        widths = [max(len(row[i]) for row in rows) + self.padding for i in range(len(COLUMNS))]
        for row in rows:
            cells = [value.ljust(width) for value, width in zip(row[:-1], widths)]
            print("".join(cells) + row[-1], file=out)


class HtmlRenderer(LeaseRenderer):
    """Full HTML page with a lease table and a source/timestamp footer."""

    def __init__(self, source_path, clock=datetime.now):
        self.source_path = source_path
        self.clock = clock
        env = Environment(autoescape=True)
        env.filters["expiry"] = format_expiry
        self.template = env.from_string(HTML_TEMPLATE)

    def render(self, leases, out):
        out.write(self.template.render(
            columns=COLUMNS,
            leases=leases,
            no_leases=NO_LEASES_ROW,
            source_path=self.source_path,
            rendered_at=self.clock().strftime(config.TIME_FORMAT),
        ))
