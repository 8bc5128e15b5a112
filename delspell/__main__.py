"""Main entry point for the delspell package."""

from loguru import logger

from delspell.cli import create_parser
from delspell.core import load_config
from delspell.pipeline import run_pipeline
from delspell.utils.logging import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("Configuration:")
        if config.dictionary:
            logger.info(f"  Dictionary: {config.dictionary}")
        if config.top_n:
            logger.info(f"  wordfreq top N: {config.top_n}")
        if config.snapshot:
            logger.info(f"  Snapshot: {config.snapshot}")
        logger.info(f"  Max distance: {config.max_distance}")
        logger.info(f"  Verbosity: {config.verbosity.value}")
        logger.info("")

    try:
        run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("✗ Processing failed")
        raise


if __name__ == "__main__":
    main()
