"""主程序入口 - 交互模式 / 批量模式"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, LOGGING_CONFIG, validate_config
from core import Calculator, RESULT_TYPES, get_result_type
from session import load_expressions, run_batch, run_repl

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Evaluate infix expressions or convert them to prefix/postfix notation"
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate in batch mode; starts the REPL when omitted"
    )
    parser.add_argument(
        "--notation",
        type=str,
        choices=sorted(RESULT_TYPES),
        default=CALCULATOR_CONFIG["default_notation"],
        help="Output form: numeric value, prefix or postfix string"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="CSV (with an 'expression' column) or text file of expressions, one per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save batch results to this CSV file"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: WARNING)"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    expressions = list(args.expressions)
    if args.file:
        expressions.extend(load_expressions(args.file))

    if expressions or args.file:
        logger.info(f"Batch mode: {len(expressions)} expressions, notation={args.notation}")
        return run_batch(expressions, args.notation, output_path=args.output_path)

    logger.info(f"Interactive mode, notation={args.notation}")
    prompt = None if sys.stdin.isatty() else ''
    run_repl(Calculator(get_result_type(args.notation)), prompt=prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
