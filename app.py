from flask import Flask, render_template
import sys

from werkzeug.exceptions import MethodNotAllowed, NotFound

from responder.page import (
    Clock,
    HostnameProvider,
    build_page_context,
    system_hostname,
    utc_now,
)

# Methods routed to the page directly; anything else lands in the 405 handler
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(get_hostname: HostnameProvider = system_hostname, clock: Clock = utc_now) -> Flask:
    """Build the responder app. Hostname lookup and clock are injectable for tests."""
    app = Flask(__name__)
    # "//" must not redirect to "/"
    app.url_map.merge_slashes = False

    def render_page():
        page = build_page_context(get_hostname=get_hostname, clock=clock)
        return render_template('index.html', page=page), 200

    @app.route('/', defaults={'path': ''}, methods=ALL_METHODS)
    @app.route('/<path:path>', methods=ALL_METHODS)
    def index(path):
        return render_page()

    # Any method and any path get the same page
    @app.errorhandler(MethodNotAllowed)
    @app.errorhandler(NotFound)
    def unrouted(error):
        return render_page()

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, 'original_exception', None) or error
        print(f"[ERROR] Error rendering page: {original}", file=sys.stderr)
        return "<!DOCTYPE html>\n<html><body><h1>Internal Server Error</h1></body></html>\n", 500

    return app


app = create_app()
