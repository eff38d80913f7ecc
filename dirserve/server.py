"""Start-up: resolve the path, bind, run the listener thread, open the browser."""

import ipaddress
import logging
import socket
import threading
import webbrowser
from dataclasses import dataclass
from urllib.parse import quote

from werkzeug.serving import WSGIRequestHandler, make_server

from dirserve.app import create_app
from dirserve.errors import BindError, BrowserOpenError, ListenerError
from dirserve.utils.paths import ResolvedTarget, resolve_target

logger = logging.getLogger(__name__)


class QuietRequestHandler(WSGIRequestHandler):
    def log_request(self, code='-', size='-'):
        # Access lines come from the app's request logger
        pass


def _is_ipv6(host):
    try:
        return ipaddress.ip_address(host).version == 6
    except ValueError:
        return False


def format_host(host):
    return f"[{host}]" if _is_ipv6(host) else host


def bind(app, host, port):
    """Bind `host:port` and wrap the socket in a threaded WSGI server for `app`."""
    family = socket.AF_INET6 if _is_ipv6(host) else socket.AF_INET
    try:
        sock = socket.create_server((host, port), family=family)
    except OSError as e:
        raise BindError(f"failed to bind {format_host(host)}:{port}: {e.strerror or e}") from e

    try:
        return make_server(
            host, port, app,
            threaded=True,
            request_handler=QuietRequestHandler,
            fd=sock.fileno(),
        )
    finally:
        # make_server dups the descriptor
        sock.close()


class ListenerThread(threading.Thread):
    """Runs the accept loop; an exception ending it is kept for `wait`."""

    def __init__(self, server):
        super().__init__(name='dirserve-listener', daemon=True)
        self.server = server
        self.error = None

    def run(self):
        try:
            self.server.serve_forever()
        except Exception as e:
            self.error = e

    def stop(self):
        self.server.shutdown()
        self.join()

    def wait(self, poll=0.5):
        # join() with a timeout keeps the main thread responsive to Ctrl+C
        while self.is_alive():
            self.join(poll)
        if self.error is not None:
            raise ListenerError(f"listener stopped: {self.error}") from self.error


def browser_url(host, port, initial_file=None):
    url = f"http://{format_host(host)}:{port}"
    if initial_file:
        url += "/" + quote(initial_file)
    return url


@dataclass
class RunningServer:
    target: ResolvedTarget
    listener: ListenerThread
    port: int
    url: str

    def wait(self):
        self.listener.wait()

    def stop(self):
        self.listener.stop()


def start(config, request_logger=None, opener=webbrowser.open):
    """Bring the server up in the background and return a handle to it.

    Nothing binds unless the path resolves, and a failed browser launch stops
    the listener again before the error is raised.
    """
    target = resolve_target(config.path)
    app = create_app(target.root_directory, logger=request_logger, cors=config.cors)

    server = bind(app, config.bind, config.port)
    port = server.server_address[1]

    listener = ListenerThread(server)
    listener.start()
    logger.info("Serving %s on http://%s:%s", target.root_directory, format_host(config.bind), port)

    url = browser_url(config.bind, port, target.initial_file)
    running = RunningServer(target, listener, port, url)

    if config.auto_open:
        try:
            opened = opener(url)
        except KeyboardInterrupt:
            running.stop()
            raise
        except Exception as e:
            running.stop()
            raise BrowserOpenError(f"failed to open {url} in a browser: {e}") from e
        if not opened:
            running.stop()
            raise BrowserOpenError(f"failed to open {url} in a browser")

    return running


def serve(config, request_logger=None, opener=webbrowser.open):
    """Start the server and block until the listener ends."""
    try:
        running = start(config, request_logger=request_logger, opener=opener)
    except KeyboardInterrupt:
        logger.info("Server stopped")
        return

    try:
        running.wait()
    except KeyboardInterrupt:
        logger.info("Server stopped")
        running.stop()
