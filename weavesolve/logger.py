import sys

from loguru import logger

PALETTE = {
    "cli": "magenta",
    "dictionary": "blue",
    "ladder_solver": "green",
}

LEVEL_PER_COMPONENT = {
    "dictionary": "INFO",
}

_floor = {"level": "WARNING"}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = max(
        logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no,
        logger.level(_floor["level"]).no,
    )
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    label = f"{comp:<15}"
    query = record["extra"].get("query")
    if query:
        label += f" | {query:<15}"

    # Colour markup must be in the returned template, not in the message
    return f"{{time:HH:mm:ss}} | <{colour}>{label}</> | <level>{{message}}</level>\n"


def configure_logging(verbose: bool = False) -> None:
    """Reinstall the stderr sink, lowering the floor to DEBUG when verbose."""
    _floor["level"] = "DEBUG" if verbose else "WARNING"
    logger.remove()
    logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)


configure_logging()
