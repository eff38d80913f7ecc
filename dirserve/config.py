import argparse
import ipaddress
import os
from dataclasses import dataclass

VERSION = "0.1.0"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ServeConfig:
    bind: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    path: str = "."
    auto_open: bool = True
    cors: bool = True
    log_level: str = "INFO"


def port_number(value):
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range (0-65535): {port}")
    return port


def bind_address(value):
    try:
        ipaddress.ip_address(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid bind address: {value!r}")
    return value


TRUE_WORDS = ("true", "yes", "on", "1")
FALSE_WORDS = ("false", "no", "off", "0")


def boolean(value):
    word = str(value).strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean: {value!r}")


def build_parser(environ=None):
    environ = os.environ if environ is None else environ

    parser = argparse.ArgumentParser(
        prog="dirserve",
        description="Serve a directory (or a file's directory) over HTTP and open it in the browser.",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=port_number,
        default=environ.get("PORT", DEFAULT_PORT),
        help="The port to listen on (default: %(default)s, or $PORT)",
    )
    parser.add_argument(
        "-b",
        "--bind",
        type=bind_address,
        default=environ.get("HOST", DEFAULT_HOST),
        help="The address to listen on (default: %(default)s, or $HOST)",
    )
    parser.add_argument(
        "-o",
        "--open",
        dest="auto_open",
        nargs="?",
        const=True,
        default=True,
        type=boolean,
        metavar="BOOL",
        help="Whether to open the browser (default: true)",
    )
    parser.add_argument(
        "--no-open",
        dest="auto_open",
        action="store_false",
        help="Don't open the browser",
    )
    parser.add_argument(
        "--cors",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Send CORS headers allowing any origin",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging verbosity (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The file or directory to serve (default: current directory)",
    )
    return parser


def parse_args(argv=None, environ=None):
    args = build_parser(environ).parse_args(argv)
    return ServeConfig(
        bind=args.bind,
        port=args.port,
        path=args.path,
        auto_open=args.auto_open,
        cors=args.cors,
        log_level=args.log_level,
    )
