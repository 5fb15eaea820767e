"""Command line interface: learn a tree from a CSV file and classify CSV rows with it.

Modes
-----
- learn   : learn a tree for a class column and print or save it as JSON
- classify: print one predicted class label per data row of a CSV file
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from id3_tlbx.analysis.learner import learn
from id3_tlbx.analysis.serialization import load_tree, save_tree, to_json
from id3_tlbx.analysis.tree import classify_frame
from id3_tlbx.data.csv_dataset import CsvDataset
from id3_tlbx.exceptions import ID3Error
from id3_tlbx.utils.logging_config import configure_logging


logger = logging.getLogger(__name__)


def _learn(args: argparse.Namespace) -> int:
    dataset = CsvDataset.from_csv(args.csv, class_column=args.class_column)
    tree = learn(dataset.view(), args.class_column, on_exhausted=args.on_exhausted)
    if args.output is None:
        print(to_json(tree, indent=True))
    else:
        save_tree(tree, args.output)
    return 0


def _classify(args: argparse.Namespace) -> int:
    tree = load_tree(args.tree)
    # the class column need not be present in the rows to classify
    for label in classify_frame(tree, CsvDataset.read_csv(args.csv)):
        print(label)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="id3-tlbx", description="Learn and apply ID3 decision trees on CSV data")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    p.add_argument("--log-format", choices=["plain", "json"], default=None, help="Log record format")
    sub = p.add_subparsers(dest="command", required=True)

    p_learn = sub.add_parser("learn", help="Learn a decision tree from a CSV file")
    p_learn.add_argument("csv", type=Path, help="Training data; the first row names the columns")
    p_learn.add_argument("--class", dest="class_column", required=True, help="Name of the class column")
    p_learn.add_argument("--output", "-o", type=Path, default=None, help="Write the JSON tree here instead of stdout")
    p_learn.add_argument(
        "--on-exhausted",
        choices=["majority", "raise"],
        default="majority",
        help="Handling of impure partitions without attributes left (default: majority)",
    )
    p_learn.set_defaults(handler=_learn)

    p_classify = sub.add_parser("classify", help="Classify the rows of a CSV file")
    p_classify.add_argument("tree", type=Path, help="JSON tree written by 'learn'")
    p_classify.add_argument("csv", type=Path, help="Rows to classify; the first row names the columns")
    p_classify.set_defaults(handler=_classify)

    return p


def main(argv: Iterable[str] | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    configure_logging(level=args.log_level.upper(), force_format=args.log_format)

    try:
        return args.handler(args)
    except (ID3Error, OSError) as exc:
        logger.debug("Command '%s' failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
