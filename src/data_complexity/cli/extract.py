"""CLI entrypoint for complexity meta-feature extraction."""

from __future__ import annotations

import argparse
import json
import logging
from functools import partial
from typing import Callable, Optional

import pandas as pd
from tqdm import tqdm

from ..core.complexity import complexity, complexity_formula
from ..core.config import ExtractionConfig
from ..dataio.loaders import as_classification, load_openml_frame, read_table, split_target
from ..errors import InvalidInputError, MeasureComputationError

LOGGER = logging.getLogger(__name__)

Loader = Callable[[], tuple[pd.DataFrame, Optional[str]]]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract data complexity meta-features and print them as JSON, one object per dataset."
    )
    parser.add_argument("paths", nargs="*", help="CSV, TSV or Parquet files to characterise.")
    parser.add_argument("--target", type=str, default=None, help="Name of the label column.")
    parser.add_argument("--formula", type=str, default=None, help="Formula selecting label and features, e.g. 'y ~ .'.")
    parser.add_argument("--groups", nargs="+", default=None, help="Measure groups to compute (default: all).")
    parser.add_argument(
        "--summary",
        nargs="*",
        default=None,
        help="Summary functions; pass the flag without names to keep the raw values.",
    )
    parser.add_argument("--eps", type=float, default=None, help="Distance threshold of the network measures.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the randomised measures.")
    parser.add_argument(
        "--classification",
        action="store_true",
        help="Treat the target column as categorical even when it is numeric.",
    )
    parser.add_argument("--config", type=str, default=None, help="YAML file with groups, summary and options.")
    parser.add_argument("--openml", type=int, nargs="+", default=[], help="OpenML dataset ids to download.")
    return parser


def _load_file(path: str, target: Optional[str]) -> tuple[pd.DataFrame, Optional[str]]:
    return read_table(path), target


def _sources(args: argparse.Namespace) -> list[tuple[str, Loader]]:
    sources: list[tuple[str, Loader]] = []
    for path in args.paths:
        sources.append((str(path), partial(_load_file, path, args.target)))
    for dataset_id in args.openml:
        sources.append((f"openml-{dataset_id}", partial(load_openml_frame, dataset_id, args.target)))
    return sources


def _extract_one(loader: Loader, args: argparse.Namespace, config: ExtractionConfig) -> dict[str, float]:
    frame, target = loader()
    if args.classification:
        if target is None:
            raise InvalidInputError("--classification needs a target column (--target)")
        frame = as_classification(frame, target)
    if args.formula:
        return complexity_formula(args.formula, frame, config.groups, config.summary, **config.options)
    if target is None:
        raise InvalidInputError("either --target or --formula is required")
    x, y = split_target(frame, target)
    return complexity(x, y, config.groups, config.summary, **config.options)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    sources = _sources(args)
    if not sources:
        parser.error("no dataset given; pass file paths or --openml ids")

    options = {name: value for name, value in (("eps", args.eps), ("seed", args.seed)) if value is not None}
    try:
        config = ExtractionConfig.from_yaml(args.config).override(
            groups=args.groups, summary=args.summary, options=options
        )
    except (InvalidInputError, OSError) as exc:
        LOGGER.error("Could not load configuration: %s", exc)
        raise SystemExit(1) from exc

    failures = 0
    for name, loader in tqdm(sources, desc="Extract", disable=len(sources) < 2):
        try:
            result = _extract_one(loader, args, config)
        except (InvalidInputError, MeasureComputationError, OSError) as exc:
            LOGGER.error("Extraction failed for %s: %s", name, exc)
            failures += 1
            continue
        print(json.dumps({"dataset": name, "measures": result}))

    if failures:
        LOGGER.error("%d of %d dataset(s) failed", failures, len(sources))
        raise SystemExit(1)


if __name__ == "__main__":
    main()
