"""
Example 01: Label index and label statistics.

Goal:
    Build the label -> observation-indices map of an imbalanced dataset and
    summarise its class distribution.

Usage:
    python examples/basic/01_label_index.py --seed 7
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
from datapattern import configure_logging, eachtarget, label, labelfreq, labelmap, nlabel


def main(argv=None):
    args = cli.parse_args("Label index demo", argv)
    if args.log_level:
        configure_logging(args.log_level)

    rng = create_rng(args.seed)
    n_obs = 20 if args.quick else 500
    X, y = toy_data.build_dataset(n_obs, rng)

    lm = labelmap(eachtarget((X, y)))
    freq = labelfreq(lm)

    result = {
        "name": "basic/01_label_index",
        "config": {
            "seed": args.seed,
            "quick": args.quick,
            "n_obs": n_obs,
        },
        "outputs": {
            "labels": label(lm),
            "first_indices": {lbl: indices[:5] for lbl, indices in lm.items()},
        },
        "metrics": {
            "n_labels": nlabel(lm),
            "frequencies": freq,
            "imbalance_ratio": max(freq.values()) / min(freq.values()),
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "01_label_index.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
