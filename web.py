import io
import logging

from flask import Flask, Response

import config
from dhcp_parser import parse_leases, FileAccessError
from leases import setup_logging
from render import HtmlRenderer


def create_app(leases_file, strict=None):
    app = Flask(__name__, static_folder=None)
    renderer = HtmlRenderer(leases_file)

    @app.route("/")
    def index():
        try:
            result = parse_leases(leases_file, strict=strict)
        except FileAccessError as e:
            logging.error(str(e))
            return Response(str(e), status=500, mimetype="text/plain")

        page = io.StringIO()
        renderer.render(result.leases, page)
        return Response(page.getvalue(), status=200, mimetype="text/html")

    return app


def main():
    setup_logging()
    leases_file = config.resolve_leases_file()
    app = create_app(leases_file)
    logging.info(f"Serving leases from {leases_file} on {config.WEB_HOST}:{config.WEB_PORT}")
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, threaded=True)


if __name__ == "__main__":
    main()
