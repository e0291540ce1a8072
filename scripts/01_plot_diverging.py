from __future__ import annotations

import argparse
import os
import sys
import tempfile
from pathlib import Path

_mpl_cache_dir = Path(tempfile.gettempdir()) / "matplotlib"
_mpl_cache_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("MPLCONFIGDIR", str(_mpl_cache_dir))

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from likert.config import (  # noqa: E402
    DEFAULT_PALETTE_5,
    DEFAULT_SCALE,
    OUTPUTS_DIR,
    RANDOM_SEED,
    SAMPLE_QUESTIONS,
    SCALES,
)
from likert.data.coding import recode_likert, resolve_questions, summarize_missingness  # noqa: E402
from likert.data.ingest import load_responses, make_sample_responses  # noqa: E402
from likert.data.reshape import aggregate_responses, split_signed  # noqa: E402
from likert.data.scale import LikertScale  # noqa: E402
from likert.data.validate import assert_required_columns  # noqa: E402
from likert.errors import LikertError  # noqa: E402
from likert.reporting.diverging import plot_diverging  # noqa: E402
from likert.reporting.figures import save_figure  # noqa: E402
from likert.reporting.palette import diverging_palette  # noqa: E402
from likert.utils.logging import configure_logging, run_metadata, write_json  # noqa: E402


def _palette_for(scale: LikertScale) -> list[str]:
    if len(scale) == len(DEFAULT_PALETTE_5):
        return list(DEFAULT_PALETTE_5)
    return diverging_palette(len(scale))


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a diverging stacked bar chart of Likert responses.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Response table (.csv/.xlsx/.parquet). Default: deterministic in-memory sample.",
    )
    parser.add_argument("--questions", nargs="+", default=None, help="Question columns to chart.")
    parser.add_argument("--scale", choices=sorted(SCALES), default=DEFAULT_SCALE, help="Response scale.")
    parser.add_argument("--weights", default=None, help="Optional survey weight column.")
    parser.add_argument("--style", choices=["offset", "signed", "both"], default="both", help="Chart layout.")
    parser.add_argument("--nrows", type=int, default=None, help="Use only the first N rows (deterministic head).")
    parser.add_argument("--outdir", type=Path, default=OUTPUTS_DIR, help="Output directory (default: outputs/).")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Seed for the sample dataset.")
    parser.add_argument("--title", default="Survey responses", help="Chart title.")
    parser.add_argument(
        "--drop-empty",
        action="store_true",
        help="Skip questions with no valid answers instead of failing.",
    )
    args = parser.parse_args()

    configure_logging()

    if args.nrows is not None and args.nrows <= 0:
        raise SystemExit("--nrows must be a positive integer.")

    categories, neutral = SCALES[args.scale]
    try:
        scale = LikertScale(categories, neutral=neutral)
    except LikertError as exc:
        raise SystemExit(str(exc)) from exc

    if args.input is None:
        df = make_sample_responses(scale, seed=args.seed)
        if args.nrows is not None:
            df = df.head(args.nrows).copy()
        source = "sample"
    else:
        if not args.input.exists():
            raise SystemExit(f"Input file not found: {args.input}")
        df = load_responses(args.input, nrows=args.nrows)
        source = str(args.input)

    requested = args.questions or (SAMPLE_QUESTIONS if args.input is None else None)
    if not requested:
        raise SystemExit("--questions is required when --input is given.")

    try:
        questions = resolve_questions(df, requested)
        if args.weights:
            assert_required_columns(df, [args.weights])
        coded = pd.DataFrame({q: recode_likert(df[q], scale) for q in questions}, index=df.index)
        if args.weights:
            coded[args.weights] = df[args.weights]
        aggregated = aggregate_responses(
            coded, questions, scale, weights=args.weights, drop_empty=args.drop_empty
        )
        if aggregated.fractions.empty:
            raise SystemExit("No questions left to chart after dropping empty questions.")
        signed = split_signed(aggregated, _palette_for(scale))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    outdir = args.outdir
    tables_dir = outdir / "tables"
    figures_dir = outdir / "figures"
    logs_dir = outdir / "logs"
    tables_dir.mkdir(parents=True, exist_ok=True)

    fractions_csv = tables_dir / "likert_fractions.csv"
    table = aggregated.fractions.round(6)
    table["n"] = aggregated.n.round(6)
    table.to_csv(fractions_csv)

    missingness_csv = tables_dir / "likert_missingness.csv"
    summarize_missingness(coded, questions).to_csv(missingness_csv, index=False)

    styles = ["offset", "signed"] if args.style == "both" else [args.style]
    written = [fractions_csv, missingness_csv]
    for style in styles:
        fig, _ax = plot_diverging(signed, style=style, title=args.title)
        written.append(save_figure(fig, figures_dir / f"diverging_{style}.png"))
        plt.close(fig)

    meta_path = write_json(
        logs_dir / "plot_run_metadata.json",
        run_metadata(
            input=source,
            nrows=args.nrows,
            seed=args.seed,
            scale=list(scale.categories),
            neutral=scale.neutral,
            weights=args.weights,
            styles=styles,
            questions=aggregated.questions,
            dropped_questions=[q for q in questions if q not in aggregated.questions],
            totals=signed.totals().round(6).to_dict(orient="index"),
            outdir=str(outdir),
        ),
    )
    written.append(meta_path)

    for path in written:
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
