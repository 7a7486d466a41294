#!/usr/bin/env python3
"""
Matplotlib viewer for synthesized signals and CSV columns.

Two modes are available:

  * ``synth`` sums sinusoids (``--component FREQ[,AMP[,PHASE]]``, repeatable)
    at ``--rate`` Hz over ``--samples`` points, and
  * ``csv`` reads one numeric column of a CSV file (``--file``/``--column``).

Both draw the time-domain signal above its magnitude spectrum. Pass
``--output`` to save the figure instead of opening a window.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import yaml
from matplotlib.figure import Figure

from ..analysis.features import peak_to_peak, rms
from ..analysis.synthesis import SignalComponent
from ..config.runtime import FourierLabConfig, load_config
from ..config.sampling import SamplingConfig
from ..core.pipeline import (
    AnalysisResult,
    analyze_components,
    analyze_samples,
    spectrum_limits,
    time_domain_limits,
)
from ..dataio.column_loader import first_numeric_column, load_table, numeric_column

logger = logging.getLogger(__name__)

REFERENCE_COLORS = ("#8884d8", "#82ca9d", "#ffc658", "#ff7300", "#00C49F", "#FFBB28", "#FF8042")


# --------------------------------------------------------------------------- # helpers
def parse_component(text: str) -> SignalComponent:
    """Parse ``FREQ[,AMP[,PHASE]]`` into a :class:`SignalComponent`."""
    parts = [p.strip() for p in text.split(",")]
    if not parts[0] or len(parts) > 3:
        raise argparse.ArgumentTypeError(
            f"expected FREQ[,AMP[,PHASE]], got {text!r}"
        )
    try:
        values = [float(p) for p in parts]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number in {text!r}") from exc
    freq = values[0]
    if freq <= 0:
        raise argparse.ArgumentTypeError(f"frequency must be > 0, got {freq}")
    amp = values[1] if len(values) > 1 else 1.0
    if amp < 0:
        raise argparse.ArgumentTypeError(f"amplitude must be >= 0, got {amp}")
    phase = values[2] if len(values) > 2 else 0.0
    return SignalComponent(frequency_hz=freq, amplitude=amp, phase_rad=phase)


def summarize_samples(result: AnalysisResult) -> str:
    """One-line RMS / peak-to-peak summary of the time-domain signal."""
    if result.is_empty:
        return "no samples"
    return (
        f"{result.samples.size} samples, RMS {rms(result.samples):.4g}, "
        f"peak-to-peak {peak_to_peak(result.samples):.4g}"
    )


def build_figure(
    result: AnalysisResult,
    *,
    title: str,
    time_label: str = "Time (s)",
    components: Sequence[SignalComponent] = (),
) -> Figure:
    """Draw ``result`` as a time-domain axis above a spectrum axis."""
    fig, (ax_time, ax_freq) = plt.subplots(2, 1, figsize=(9, 6), tight_layout=True)
    fig.suptitle(title)

    summary = summarize_samples(result)
    logger.info("Time domain: %s", summary)
    ax_time.plot(result.time, result.samples, color="#34d399", linewidth=1.0)
    ax_time.set_title(summary, fontsize="small")
    ax_time.set_xlabel(time_label)
    ax_time.set_ylabel("Amplitude")
    if components:
        ax_time.set_ylim(*time_domain_limits(components))
    ax_time.grid(True, alpha=0.3)

    spectrum = result.spectrum
    ax_freq.plot(spectrum.frequencies, spectrum.magnitudes, color="#fb923c", linewidth=1.0)
    ax_freq.set_xlabel(f"Frequency (Hz) - max: {spectrum.nyquist_hz:.1f} Hz")
    ax_freq.set_ylabel("Magnitude")
    ax_freq.set_ylim(*spectrum_limits(spectrum))
    ax_freq.grid(True, alpha=0.3)
    for idx, comp in enumerate(components):
        color = comp.color or REFERENCE_COLORS[idx % len(REFERENCE_COLORS)]
        ax_freq.axvline(comp.frequency_hz, color=color, linestyle="--", linewidth=0.8,
                        label=f"{comp.frequency_hz:g}Hz")
    if components:
        ax_freq.legend(loc="upper right")

    return fig


def _run_synth(args: argparse.Namespace, cfg: FourierLabConfig) -> Figure:
    components: List[SignalComponent] = list(args.component or cfg.components)
    if len(components) > cfg.max_components:
        logger.warning(
            "%d components requested; only %d are plotted",
            len(components),
            cfg.max_components,
        )
        components = components[: cfg.max_components]
    sampling = SamplingConfig(
        sampling_rate_hz=args.rate if args.rate is not None else cfg.sampling.sampling_rate_hz,
        sample_count=args.samples if args.samples is not None else cfg.sampling.sample_count,
    )
    result = analyze_components(components, sampling)
    return build_figure(
        result,
        title=f"Synthesized signal ({sampling.sample_count} samples @ {sampling.sampling_rate_hz:g} Hz)",
        components=components,
    )


def _run_csv(args: argparse.Namespace, cfg: FourierLabConfig) -> Figure:
    table = load_table(Path(args.file).expanduser())
    column = args.column or first_numeric_column(table)
    if column is None:
        raise ValueError(f"{args.file} has no columns")
    values = numeric_column(table, column)
    rate = args.rate if args.rate is not None else cfg.csv_sampling_rate_hz
    logger.info("Analyzing column %r: %d numeric values @ %g Hz", column, values.size, rate)
    result = analyze_samples(values, rate)
    return build_figure(
        result,
        title=f"{Path(args.file).name} [{column}]",
        time_label="Sample index",
    )


# --------------------------------------------------------------------------- # CLI
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot a signal and its FFT magnitude spectrum."
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="Optional YAML config with sampling defaults and initial components.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Save the figure to this path instead of opening a window.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    synth = sub.add_parser("synth", help="Plot a sum of sinusoids.")
    synth.add_argument(
        "--component",
        type=parse_component,
        action="append",
        metavar="FREQ[,AMP[,PHASE]]",
        help="Sinusoid to add (repeatable). Defaults to the config's components.",
    )
    synth.add_argument("-r", "--rate", type=float, help="Sampling rate in Hz.")
    synth.add_argument("-n", "--samples", type=int, help="Number of samples (power of two).")

    csv = sub.add_parser("csv", help="Plot one numeric column of a CSV file.")
    csv.add_argument("-f", "--file", type=str, required=True, help="CSV file with a header row.")
    csv.add_argument("--column", type=str, help="Column to analyze (default: first numeric).")
    csv.add_argument("-r", "--rate", type=float, help="Sampling rate of the column in Hz.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "csv" and not Path(args.file).expanduser().exists():
        parser.error(f"CSV file not found: {args.file}")

    try:
        cfg = load_config(args.config)
        if args.mode == "synth":
            fig = _run_synth(args, cfg)
        else:
            fig = _run_csv(args, cfg)
    except (KeyError, ValueError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    if args.output:
        out_path = Path(args.output).expanduser()
        fig.savefig(out_path)
        plt.close(fig)
        logger.info("Figure written to %s", out_path)
    else:
        try:
            plt.show()
        except KeyboardInterrupt:
            return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
