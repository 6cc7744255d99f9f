"""DeltaWeight Command Line - Two-Class Corpus to ARFF.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from deltaweight_core.engine import DeltaTfIdfEngine, WeightingConfig
from deltaweight_core.errors import DeltaWeightError
from deltaweight_core.export.arff import ArffConfig, ArffExporter
from deltaweight_core.ranking.idf import IdfScheme
from deltaweight_core.ranking.tf import TfScheme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deltaweight",
        description="Weight two classes of documents with (Delta) TF-IDF and export ARFF",
    )
    parser.add_argument("class1", help="File with class 1 documents, one per line")
    parser.add_argument("class2", help="File with class 2 documents, one per line")
    parser.add_argument("-o", "--output", help="ARFF output file (default: stdout)")
    parser.add_argument(
        "--tf",
        choices=[s.value for s in TfScheme],
        default=TfScheme.AUGMENTED.value,
        help="TF formula",
    )
    parser.add_argument(
        "--idf",
        choices=[s.value for s in IdfScheme],
        default=IdfScheme.DELTA_SMOOTHED.value,
        help="IDF formula",
    )
    parser.add_argument("--relation", default="tweets", help="ARFF relation name")
    parser.add_argument(
        "--labels",
        nargs=2,
        metavar=("CLASS1", "CLASS2"),
        default=["pos", "neg"],
        help="Class attribute values",
    )
    parser.add_argument("--workers", type=int, default=1, help="Worker threads")
    parser.add_argument("--encoding", default="utf-8", help="Input file encoding")
    parser.add_argument("--stats", action="store_true", help="Print run statistics to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = WeightingConfig(
            tf_scheme=args.tf,
            idf_scheme=args.idf,
            workers=args.workers,
            encoding=args.encoding,
        )
    except ValueError as e:
        print(f"deltaweight: {e}", file=sys.stderr)
        return 2

    try:
        result = DeltaTfIdfEngine(config).run_files(args.class1, args.class2)
    except DeltaWeightError as e:
        print(f"deltaweight: {e}", file=sys.stderr)
        return 1

    exporter = ArffExporter(ArffConfig(relation=args.relation, class_names=tuple(args.labels)))
    if args.output:
        try:
            exporter.write(result, args.output)
        except OSError as e:
            print(f"deltaweight: cannot write {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        exporter.export(result, sys.stdout)

    if args.stats:
        print(json.dumps(result.statistics(), indent=2), file=sys.stderr)
    return 0


__all__ = ["build_parser", "main"]
