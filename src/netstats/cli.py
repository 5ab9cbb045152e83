import argparse
import logging
import sys

from netstats.constants import ALL_METRICS
from netstats.pipeline import AnalysisConfig, ConfigError, analyze_file, load_config
from netstats.report import print_report


def build_parser():

    ap = argparse.ArgumentParser(prog='netstats', description="structural statistics for an undirected edge list")
    ap.add_argument('data_path', help="whitespace separated edge list, e.g. facebook_combined.txt")
    ap.add_argument('--config', help="YAML file with AnalysisConfig keys")
    ap.add_argument('--metrics', nargs='+', choices=ALL_METRICS, help="subset of metrics to compute (default: all)")
    ap.add_argument('--bins', nargs='+', type=int, help="degree bucket upper bounds (default: 10 25)")
    ap.add_argument('--path-sample', type=int, help="bfs from this many seeded random sources")
    ap.add_argument('--similarity-sample', type=int, help="compare only this many seeded random nodes")
    ap.add_argument('--edge-sample', type=int, help="keep this many seeded random edges before building the graph")
    ap.add_argument('--seed', type=int, help="seed for every sampler")
    ap.add_argument('--workers', type=int, help="process pool size for paths and similarity")
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap


def main(argv=None):

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else AnalysisConfig()
        config = config.override(
            metrics=tuple(args.metrics) if args.metrics else None,
            bins=tuple(args.bins) if args.bins else None,
            path_sample=args.path_sample,
            similarity_sample=args.similarity_sample,
            edge_sample=args.edge_sample,
            seed=args.seed,
            workers=args.workers,
        )
        results = analyze_file(args.data_path, config=config)
    except ConfigError as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        # unreadable, missing or not utf-8 text
        print(f"Error reading data file: {e}", file=sys.stderr)
        return 1

    print_report(results)
    return 0
