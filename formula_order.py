#!/usr/bin/env python
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from core.exceptions import ConfigError, FormulaSyntaxError, SemanticError
from core.topological_sort import order_formulas
from core.validation import check_order
from inout.config import load_config
from inout.reader import read_text
from symbolic.parser import parse_formulas
from utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

SYNTAX_ERROR_MESSAGE = "syntax error"
CYCLE_MESSAGE = "cycle"


def order_labels(text: str) -> List[str]:
    """
    Parse formula declarations and return their labels in evaluation order.

    :raises FormulaSyntaxError: On malformed input.
    :raises SemanticError: On circular dependencies.
    """
    graph = parse_formulas(text)
    ordered = order_formulas(graph)
    check_order(graph, ordered)
    return graph.labels(ordered)


def run(text: str, stdout: TextIO, show_cycle: bool = False) -> int:
    """
    Print the ordered labels of `text`, or a single error line, to `stdout`.
    Returns the process exit status.
    """
    try:
        labels = order_labels(text)
    except FormulaSyntaxError as e:
        logger.debug("Syntax error: %s", e)
        print(SYNTAX_ERROR_MESSAGE, file=stdout)
        return 1
    except SemanticError as e:
        if show_cycle and e.cycle:
            logger.warning("Cyclic dependency: %s", " -> ".join(e.cycle))
        logger.debug("Semantic error: %s", e)
        print(CYCLE_MESSAGE, file=stdout)
        return 1

    for label in labels:
        print(label, file=stdout)
    logger.info("Ordered %d formulas.", len(labels))
    return 0


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print formula declarations in dependency order.")
    parser.add_argument("input", nargs="?", default=None,
                        help="File with one declaration per line (default: standard input).")
    parser.add_argument("--config", help="Path to a YAML configuration file.", default=None)
    parser.add_argument("--log-file", help="Also write log records to this file.", default=None)
    parser.add_argument("--show-cycle", action="store_true",
                        help="Log the chain of formulas forming a cycle.")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """
    Command-line entry point.

    Command-line arguments:
      input: Path to the declarations file; standard input when omitted or '-'.
      --config: Path to the YAML configuration file.
      --log-file: Path to a log file.
      --show-cycle: Log the formulas forming a detected cycle.
      --verbose: Enable DEBUG logging.
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    args = get_parser().parse_args(argv)
    setup_logging(level=logging.WARNING, stream=stderr)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    if args.verbose:
        config.log_level = 'DEBUG'
    if args.log_file:
        config.log_file = args.log_file
    config.show_cycle = config.show_cycle or args.show_cycle

    setup_logging(level=config.level, log_file=config.log_file, stream=stderr)
    logger.debug("Configuration: %s", config)

    if config.recursion_limit and config.recursion_limit > sys.getrecursionlimit():
        sys.setrecursionlimit(config.recursion_limit)

    try:
        text = read_text(args.input, stdin)
    except OSError as e:
        logger.error("Cannot read input '%s': %s", args.input, e)
        return 2

    return run(text, stdout, show_cycle=config.show_cycle)


if __name__ == "__main__":
    sys.exit(main())
