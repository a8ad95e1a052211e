import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RFID read-event tracker server")

    parser.add_argument("--listen", type=str, default="127.0.0.1", metavar="IP",
                        help="Specify the IP address to listen on (default: 127.0.0.1).")
    parser.add_argument("--port", type=int, default=8188, help="Set the listen port.")
    parser.add_argument("--database-url", type=str, default="sqlite:///tracker.db",
                        help="Specify the database URL, e.g. for an in-memory database you can use 'sqlite:///:memory:'.")
    parser.add_argument("--verbose", default="INFO", const="DEBUG", nargs="?",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set the logging level")
    parser.add_argument("--log-stdout", action="store_true",
                        help="Send normal process output to stdout instead of stderr (default).")
    return parser


parser = build_parser()

# Defaults only at import time; main() parses the real command line.
args = parser.parse_args([])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    global args
    args = parser.parse_args(argv)
    return args
