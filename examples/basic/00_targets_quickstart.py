"""
Example 00: Target access quickstart.

Goal:
    Show how targets are resolved for arrays, sequences, tuples of aligned
    containers and subsets, with and without a transform.

Usage:
    python examples/basic/00_targets_quickstart.py --seed 123 --quick
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, toy_data
from datapattern.core.utils import create_rng
from datapattern import (
    DataSubset,
    configure_logging,
    eachtarget,
    nobs,
    resolve_target,
    targets,
)


def main(argv=None):
    args = cli.parse_args("Target access quickstart", argv)
    if args.log_level:
        configure_logging(args.log_level)

    rng = create_rng(args.seed)
    n_obs = 10 if args.quick else 100
    X, y = toy_data.build_dataset(n_obs, rng)

    # 1. Whole-container targets: the label list is returned as-is
    all_targets = targets((X, y))

    # 2. A transform switches to per-observation resolution
    is_positive = targets((X, y), lambda lbl: lbl == "pos")

    # 3. Single observations and subsets
    first_target = resolve_target((X[0], y[0]))
    subset = DataSubset((X, y), [0, 2, 4])
    subset_targets = targets(subset)

    # 4. Lazy iteration over column-major features
    Xc = X.T
    lazy = eachtarget((Xc, y), str.upper, obsdim=("last", "first"))

    result = {
        "name": "basic/00_targets_quickstart",
        "config": {
            "seed": args.seed,
            "quick": args.quick,
            "n_obs": nobs((X, y)),
        },
        "outputs": {
            "first_targets": list(all_targets[:5]),
            "subset_targets": subset_targets,
            "upper_targets": list(lazy)[:5],
        },
        "metrics": {
            "n_positive": sum(is_positive),
            "first_target": first_target,
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "00_targets.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
