"""主程序入口 - 中缀表达式计算器"""
import argparse
import logging
import sys

import pandas as pd

from config.config import CALC_CONFIG, LOGGING_CONFIG, BATCH_CONFIG, validate_config
from calc_core import to_postfix
from calculator import ExpressionEvaluator
from utils import format_postfix, format_result

logger = logging.getLogger(__name__)


def run_expressions(expressions, evaluator, show_postfix=False, precision=None):
    """逐个求值并打印，返回失败的数量"""
    failed = 0
    for expression in expressions:
        if show_postfix:
            converted = to_postfix(expression)
            if converted.is_success:
                print(f"postfix: {format_postfix(converted.value)}")

        result = evaluator.evaluate(expression)
        if not result.is_success:
            failed += 1
        print(format_result(expression, result, precision))
    return failed


def run_file(input_path, column, output_path, evaluator):
    """对 CSV 文件中的表达式列求值，返回失败的数量"""
    logger.info(f"Loading expressions from {input_path}")
    df = pd.read_csv(input_path)
    result = evaluator.evaluate_frame(df, column)

    failed = int(result[BATCH_CONFIG["error_column"]].notna().sum())
    logger.info(f"Evaluated {len(result)} expressions, {failed} failed")

    if output_path:
        logger.info(f"Saving results to {output_path}")
        result.to_csv(output_path, index=False)
    else:
        print(result.to_string(index=False))
    return failed


def main(args):
    validate_config()
    evaluator = ExpressionEvaluator(reject_non_finite=args.reject_non_finite or None)

    failed = 0
    if args.input:
        failed += run_file(args.input, args.column, args.output, evaluator)
    if args.expressions:
        failed += run_expressions(args.expressions, evaluator, args.show_postfix, args.precision)
    if not args.input and not args.expressions:
        # 没有参数时从标准输入逐行读取
        expressions = [line.rstrip("\n") for line in sys.stdin]
        failed += run_expressions(expressions, evaluator, args.show_postfix, args.precision)

    logger.info(f"Cache stats: {evaluator.get_cache_stats()}")
    return 1 if failed else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix arithmetic expression calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2 + 3 * 4'"
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="CSV file with a column of expressions"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["default_column"],
        help="Name of the expression column in the CSV file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save the evaluated CSV file"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix form of each expression"
    )
    parser.add_argument(
        "--reject_non_finite",
        action="store_true",
        help="Treat inf/nan results as bad expressions"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=CALC_CONFIG["display_precision"],
        help="Significant digits used when printing results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: WARNING)"
    )
    return parser


def run():
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))


if __name__ == "__main__":
    run()
