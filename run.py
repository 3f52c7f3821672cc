#!/usr/bin/env python3
"""
Hello Candidate - Responder
Startup script: binds the listening socket and serves the page forever
"""

import os
import sys

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8080


def check_dependencies():
    """Check if required packages are installed"""
    required_packages = [
        'flask',
        'werkzeug',
        'pytz'
    ]

    missing_packages = []
    for package in required_packages:
        try:
            __import__(package.replace('-', '_'))
        except ImportError:
            missing_packages.append(package)

    if missing_packages:
        print("[ERROR] Missing required packages:", file=sys.stderr)
        for package in missing_packages:
            print(f"   - {package}", file=sys.stderr)
        print("   Install dependencies with: pip install -e .", file=sys.stderr)
        return False

    return True


def load_config(environ=None):
    """Read HOST, PORT and DEBUG from the environment. Raises ValueError on a bad PORT."""
    if environ is None:
        environ = os.environ

    host = environ.get('HOST', DEFAULT_HOST)
    raw_port = environ.get('PORT', str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT must be between 0 and 65535, got {port}")
    debug = environ.get('DEBUG', 'False').lower() == 'true'

    return {'host': host, 'port': port, 'debug': debug}


def create_server(app, host, port):
    """Bind the listening socket. Raises OSError (or exits) if the address is unavailable."""
    from werkzeug.serving import make_server

    return make_server(host, port, app, threaded=True)


def main(environ=None, app=None):
    if not check_dependencies():
        sys.exit(1)

    try:
        config = load_config(environ)
    except ValueError as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    if app is None:
        from app import app

    app.debug = config['debug']

    try:
        server = create_server(app, config['host'], config['port'])
    except OSError as e:
        print(f"[ERROR] Could not bind {config['host']}:{config['port']}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Server running on http://localhost:{server.server_port}/", flush=True)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped", file=sys.stderr)
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
