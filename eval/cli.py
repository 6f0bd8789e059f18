from __future__ import annotations

import argparse
import logging
from typing import Optional

from specs.config import SuiteConfig
from specs.ops import list_ops
from .report import format_summary, format_trials
from .suite import run_suite


def _config_from_args(args: argparse.Namespace) -> SuiteConfig:
    return SuiteConfig(
        num_random_trials=int(args.trials),
        num_samples=int(args.samples),
        num_features=int(args.features),
        threshold=float(args.threshold),
        dtype=args.dtype,
        softmax=args.softmax,
        eigen=args.eigen,
        tie_tol=float(args.tie_tol),
        concurrency=int(args.concurrency),
        dataset_path=args.dataset,
    )


def cmd_run(args: argparse.Namespace) -> None:
    cfg = _config_from_args(args)
    res = run_suite(cfg)
    if args.verbose:
        print(format_trials(res))
    print(format_summary(res))


def build_parser() -> argparse.ArgumentParser:
    defaults = SuiteConfig()
    p = argparse.ArgumentParser(
        prog="attention-eigen",
        description="Compare self-similarity attention against the principal eigenvector of the Gram matrix",
    )
    p.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    p1 = sub.add_parser("run", help="Run the reference trial plus seeded random trials")
    p1.add_argument("--trials", type=int, default=defaults.num_random_trials, help="Number of random trials (seeds 1..N)")
    p1.add_argument("--samples", type=int, default=defaults.num_samples, help="Vectors per random trial")
    p1.add_argument("--features", type=int, default=defaults.num_features, help="Dimension of random vectors")
    p1.add_argument("--threshold", type=float, default=defaults.threshold)
    p1.add_argument("--dtype", type=str, default=defaults.dtype, choices=["float32", "float64"])
    p1.add_argument("--softmax", type=str, default=defaults.softmax, choices=list(list_ops("numerics")["numerics"]))
    p1.add_argument("--eigen", type=str, default=defaults.eigen, choices=list(list_ops("spectral")["spectral"]))
    p1.add_argument("--tie-tol", type=float, default=defaults.tie_tol)
    p1.add_argument("--concurrency", type=int, default=defaults.concurrency)
    p1.add_argument("--dataset", type=str, default=None, help="Path to an iris zip archive (default: bundled)")
    p1.add_argument("--verbose", action="store_true", help="Print a per-trial table")
    p1.set_defaults(func=cmd_run)

    return p


def main(argv: Optional[list[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s - %(levelname)s - %(message)s")
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main()
