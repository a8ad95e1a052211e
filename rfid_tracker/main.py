import logging

from aiohttp import web

from rfid_tracker import cli_args
from rfid_tracker.api.routes import register_tracking_system
from rfid_tracker.database.db import init_db
from rfid_tracker.logger import setup_logger


def create_app() -> web.Application:
    app = web.Application()
    register_tracking_system(app)
    return app


def main(argv: list[str] | None = None) -> None:
    args = cli_args.parse_args(argv)
    setup_logger(log_level=args.verbose, use_stdout=args.log_stdout)

    init_db(args.database_url)
    app = create_app()

    logging.info("Starting server on http://%s:%d", args.listen, args.port)
    web.run_app(app, host=args.listen, port=args.port, print=None)


if __name__ == "__main__":
    main()
