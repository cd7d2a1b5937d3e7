"""
cli.py - command line front end for Logos
Features:
- `logos analyze FILE`: quality metrics and top n-gram transitions of a text file
- optional keyword list, Markov matrix export to JSON
- JSON config file with flag overrides
- Uses Rich for tables and formatting
"""

import argparse
import json
import math
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from logos.core.metrics import PublicationReport, analyze
from logos.utils.config_manager import Config, ConfigError, DEFAULT_CONFIG_PATH, LogosConfig
from logos.utils.logger_utils import Log
from logos.utils.model_store import ModelStoreError, load_body, load_word_list, save_matrix

# initialise console for rich output
console = Console()
err_console = Console(stderr=True)


def _non_negative_int(text: str) -> int:
    try:
        val = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if val < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {val}")
    return val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logos",
        description="Measure publication quality and build n-gram Markov models.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    a = sub.add_parser("analyze", help="analyze a UTF-8 text file")
    a.add_argument("path", help="text file to analyze")
    a.add_argument("--ngram", type=int, default=None, help="n-gram size for the Markov matrix")
    a.add_argument("--long-threshold", type=int, default=None,
                   help="count words strictly longer than this")
    a.add_argument("--wordlist", default=None, help="file of keywords to count")
    a.add_argument("--matrix-out", default=None, help="write the Markov matrix here as JSON")
    a.add_argument("--top", type=_non_negative_int, default=None, help="number of transitions to display")
    a.add_argument("--json", action="store_true", help="print the report as JSON")
    a.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    a.add_argument("--verbose", action="store_true", help="log progress to stderr")
    return parser


# DISPLAY -------------------------------------------------------------------------------
def _fmt(v) -> str:
    if v is None:
        return "-"
    if isinstance(v, float):
        return "nan" if math.isnan(v) else f"{v:.3f}"
    return str(v)


def render_report(report: PublicationReport, path: str, topn: int) -> None:
    """Print the metrics table and the strongest transitions."""
    table = Table(title=f"Publication metrics: {escape(path)}", box=box.SIMPLE, show_edge=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="bold")
    table.add_row("Lines", _fmt(report.line_count))
    table.add_row("Words", _fmt(report.word_count))
    table.add_row("Avg words / line", _fmt(report.average_words_per_line))
    table.add_row("Avg word length", _fmt(report.average_word_length))
    table.add_row(f"Words longer than {report.long_word_threshold}", _fmt(report.words_longer_than))
    table.add_row("Words in list", _fmt(report.words_in_list))
    table.add_row(f"Markov rows (n={report.ngram_size})", _fmt(len(report.markov)))
    console.print(table)

    triples = report.top_transitions(topn)
    if not triples:
        console.print("[dim](no transitions)[/dim]")
        return
    t = Table(title="Top transitions", box=box.SIMPLE, show_edge=False)
    t.add_column("From", style="bold")
    t.add_column("To", style="bold")
    t.add_column("P", justify="right", style="magenta")
    for src, dst, w in triples:
        t.add_row(str(src), str(dst), f"{w:.3f}")
    console.print(t)


# COMMANDS ------------------------------------------------------------------------------
def run_analyze(args: argparse.Namespace) -> int:
    cfg: LogosConfig = Config(args.config).as_logos_config(
        ngram_size=args.ngram,
        long_word_threshold=args.long_threshold,
        top_transitions=args.top,
        log_level="INFO" if args.verbose else None,
    )
    Log.configure(level=cfg.log_level, path=cfg.log_path, use_color=cfg.use_color)

    body = load_body(args.path)
    word_list = load_word_list(args.wordlist) if args.wordlist else None

    with Log.time_block("analyze"):
        report = analyze(
            body,
            ngram_size=cfg.ngram_size,
            long_word_threshold=cfg.long_word_threshold,
            word_list=word_list,
        )

    if args.matrix_out:
        save_matrix(report.markov, args.matrix_out, ngram_size=cfg.ngram_size)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, sort_keys=True))
    else:
        render_report(report, args.path, cfg.top_transitions)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "analyze":
            return run_analyze(args)
    except (ModelStoreError, ConfigError, ValueError) as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
