"""Application factory and command-line entry point for the API server."""

from __future__ import annotations

import argparse
import html
import logging
import os
import sys

from flask import Flask, Response, abort, jsonify, redirect

from usermgmt.docs import TITLE, swagger_spec
from usermgmt.handlers import create_blueprint
from usermgmt.models import UserStore, seeded_store

DEFAULT_PORT = "5000"

logger = logging.getLogger(__name__)


def _index_page() -> str:
    spec = swagger_spec()
    rows = []
    for path, operations in spec["paths"].items():
        for method, operation in operations.items():
            rows.append(
                "<li><code>{} {}</code> &mdash; {}</li>".format(
                    html.escape(method.upper()),
                    html.escape(path),
                    html.escape(operation["summary"]),
                )
            )
    title = html.escape(spec["info"]["title"])
    return (
        "<!DOCTYPE html>\n<html><head><meta charset=\"utf-8\">"
        f"<title>{title}</title></head><body>"
        f"<h1>{title}</h1><p>{html.escape(spec['info']['description'])}</p>"
        f"<ul>{''.join(rows)}</ul>"
        "<p><a href=\"doc.json\">doc.json</a></p></body></html>"
    )


def create_app(store: UserStore | None = None) -> Flask:
    """Build the Flask application; a seeded store is used when none is given."""
    app = Flask(__name__)
    if store is None:
        store = seeded_store()
    app.extensions["user_store"] = store
    app.register_blueprint(create_blueprint(store))

    @app.get("/swagger/<path:name>")
    def swagger(name: str) -> Response:
        if name == "doc.json":
            return jsonify(swagger_spec())
        if name == "index.html":
            return Response(_index_page(), mimetype="text/html")
        abort(404)

    @app.get("/")
    def root() -> Response:
        return redirect("/swagger/index.html", code=302)

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the API server; the port comes from --port, then PORT, then 5000."""
    parser = argparse.ArgumentParser(prog="usermgmt", description=TITLE)
    parser.add_argument("--port", help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    port = args.port or os.environ.get("PORT") or DEFAULT_PORT
    try:
        port_number = int(port)
        if not 0 <= port_number <= 65535:
            raise ValueError(port)
    except ValueError:
        logger.error("Failed to start server: invalid port %r", port)
        return 1

    app = create_app()
    logger.info("Server starting on port %s", port)
    try:
        app.run(host="0.0.0.0", port=port_number)
    except OSError as exc:
        logger.error("Failed to start server: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())