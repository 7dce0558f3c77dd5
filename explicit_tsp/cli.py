# explicit_tsp/cli.py
from __future__ import annotations
import argparse, json, sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import yaml

from .config import ParserConfig, load_config
from .errors import ParseError
from .parser import load_instance


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Load explicit-distance TSPLIB instances and report what was read.")
    ap.add_argument("--instance", required=True, nargs="+", help="Path(s) to .tsp")
    ap.add_argument("--config", help="YAML config with a 'parser' block (configs/params.yaml)")
    ap.add_argument("--json", dest="json_out", help="Write the summaries of parsed instances to this file")
    ap.add_argument("--show-matrix", action="store_true", help="Print the distance matrix")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else ParserConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: failed to read config {args.config}: {e}", file=sys.stderr)
        return 2

    summaries = {}
    failed = 0
    for path in args.instance:
        try:
            ins = load_instance(path, cfg)
        except ParseError as e:
            print(f"ERROR: {path}: {e}", file=sys.stderr)
            failed += 1
            continue

        s = ins.summary()
        summaries[path] = s
        print(f"{s['name'] or Path(path).stem}: n={s['dimension']} "
              f"edge_weight_format={s['edge_weight_format']} "
              f"coords={'yes' if s['has_coordinates'] else 'no'} "
              f"symmetric={'yes' if s['symmetric'] else 'no'}")
        if args.show_matrix:
            with np.printoptions(linewidth=120, threshold=sys.maxsize):
                print(ins.distances)

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="utf-8") as w:
            json.dump(summaries, w, indent=2)
        print(f"[INFO] Summaries -> {out}")

    if failed:
        print(f"[INFO] {failed} of {len(args.instance)} instance(s) failed to parse", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
