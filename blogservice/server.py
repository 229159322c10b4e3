"""HTTP server wiring for the blog service."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from flask import Flask
from werkzeug.serving import make_server

from .db import Config, init_pgsql, new_client
from .handler import BlogHandler, make_blueprint
from .service import new_service

_log = logging.getLogger(__name__)

WEB_PORT = "3000"


@dataclass
class Server:
    """A Flask application bound to a listening port."""

    app: Flask
    addr: str = WEB_PORT

    def listen_and_serve(self) -> None:
        """Listen on all interfaces and serve until interrupted."""
        try:
            httpd = make_server("0.0.0.0", int(self.addr), self.app, threaded=True)
        except OSError as err:
            print("Error listening:", err)
            sys.exit(1)
        try:
            httpd.serve_forever()
        finally:
            httpd.server_close()

    def get_handler(self) -> Flask:
        """Return the WSGI application."""
        return self.app


def create_app(blog_handler: BlogHandler) -> Flask:
    """Build the application with the blog routes under /api/v1."""
    app = Flask(__name__)
    app.register_blueprint(make_blueprint(blog_handler), url_prefix="/api/v1")
    return app


def _new_server(app: Flask) -> Server:
    print("****Server Started on", WEB_PORT, "****")
    return Server(app=app, addr=WEB_PORT)


def new(database_url: str | None = None) -> Server:
    """Connect to the database and build a server for the blog API."""
    init_pgsql(database_url)
    sql_client = new_client(Config(db_connection=""))
    storage = new_service(sql_client)
    return _new_server(create_app(BlogHandler(storage=storage)))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the blog service."""
    parser = argparse.ArgumentParser(description="Serve the blog API.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    server = new()
    try:
        server.listen_and_serve()
    except KeyboardInterrupt:
        pass
    _log.info("service stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())