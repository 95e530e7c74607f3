import logging
import sys

def setup_logging(verbose: bool = False) -> None:
    """Console logging for the command-line tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # pygame/PIL chatter stays quiet
    logging.getLogger("PIL").setLevel(logging.WARNING)
