"""
Wiki API - Entry Point
Serves the /articles REST API backed by MongoDB.
"""
import argparse
import logging
import sys
from wiki_api import create_app, Config, ConfigurationError


def setup_logging(verbose: bool = False, log_file: str = None):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def main():
    """Run the wiki API server"""
    parser = argparse.ArgumentParser(
        description='Wiki API - REST API for articles stored in MongoDB'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    parser.add_argument(
        '--host',
        default=None,
        help='Interface to listen on (default: WIKI_HOST or 0.0.0.0)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=None,
        help='Port to listen on (default: WIKI_PORT or 3000)'
    )

    args = parser.parse_args()

    setup_logging(args.verbose, Config.WIKI_LOG_FILE)
    logger = logging.getLogger(__name__)

    overrides = {}
    if args.host:
        overrides['WIKI_HOST'] = args.host
    if args.port:
        overrides['WIKI_PORT'] = args.port

    try:
        app = create_app(overrides)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    host = app.config['WIKI_HOST']
    port = app.config['WIKI_PORT']
    debug = app.config['WIKI_DEBUG']

    logger.info(f"Server is running on port {port}.")

    app.run(
        host=host,
        port=port,
        debug=debug,
        use_reloader=debug,
        threaded=True
    )


if __name__ == '__main__':
    main()
