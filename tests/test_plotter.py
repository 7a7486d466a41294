import argparse
import logging
import pathlib

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from fourierlab.analysis.synthesis import SignalComponent  # noqa: E402
from fourierlab.config.sampling import SamplingConfig  # noqa: E402
from fourierlab.core.pipeline import analyze_components, analyze_samples  # noqa: E402
from fourierlab.tools.plotter import build_figure, main, parse_component, summarize_samples  # noqa: E402


def test_parse_component_defaults() -> None:
    assert parse_component("5") == SignalComponent(5.0, 1.0, 0.0)
    assert parse_component("12, 0.5, 1.57") == SignalComponent(12.0, 0.5, 1.57)


@pytest.mark.parametrize("text", ["", "abc", "5,1,0,9", "-3", "5,-1"])
def test_parse_component_rejects_bad_input(text: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_component(text)


def test_build_figure_has_time_and_spectrum_axes() -> None:
    comps = [SignalComponent(5.0, 1.0), SignalComponent(12.0, 0.5)]
    result = analyze_components(comps, SamplingConfig(200.0, 128))
    fig = build_figure(result, title="demo", components=comps)
    try:
        ax_time, ax_freq = fig.axes
        assert len(ax_time.lines) == 1
        # spectrum line plus one reference line per component
        assert len(ax_freq.lines) == 3
        assert "100.0 Hz" in ax_freq.get_xlabel()
    finally:
        plt.close(fig)


def test_main_synth_writes_output(tmp_path: pathlib.Path) -> None:
    out = tmp_path / "synth.png"
    code = main(["--output", str(out), "synth", "--component", "5,1", "--rate", "100", "--samples", "64"])
    assert code == 0
    assert out.exists()


def test_main_synth_uses_config_components(tmp_path: pathlib.Path) -> None:
    cfg = tmp_path / "fourierlab.yaml"
    cfg.write_text(
        "sampling:\n  sampling_rate_hz: 500\n  sample_count: 256\ncomponents:\n  - frequency_hz: 20\n",
        encoding="utf-8",
    )
    out = tmp_path / "cfg.png"
    assert main(["--config", str(cfg), "--output", str(out), "synth"]) == 0
    assert out.exists()


def test_main_csv_writes_output(tmp_path: pathlib.Path) -> None:
    data = tmp_path / "data.csv"
    data.write_text("label,value\n" + "\n".join(f"r{i},{i % 4}" for i in range(20)) + "\n", encoding="utf-8")
    out = tmp_path / "csv.png"
    assert main(["--output", str(out), "csv", "--file", str(data)]) == 0
    assert out.exists()


def test_main_csv_missing_file(tmp_path: pathlib.Path) -> None:
    with pytest.raises(SystemExit):
        main(["csv", "--file", str(tmp_path / "missing.csv")])


def test_main_csv_unknown_column(tmp_path: pathlib.Path) -> None:
    data = tmp_path / "data.csv"
    data.write_text("a\n1\n2\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["--output", str(tmp_path / "x.png"), "csv", "--file", str(data), "--column", "b"])


def test_time_axis_title_reports_rms_and_peak_to_peak(caplog: pytest.LogCaptureFixture) -> None:
    comps = [SignalComponent(4.0, 2.0)]
    result = analyze_components(comps, SamplingConfig(64.0, 64))
    with caplog.at_level(logging.INFO, logger="fourierlab.tools.plotter"):
        fig = build_figure(result, title="demo", components=comps)
    try:
        title = fig.axes[0].get_title()
        assert title == summarize_samples(result)
        assert title.startswith("64 samples, RMS 1.414, peak-to-peak 4")
        assert "Time domain: 64 samples" in caplog.text
    finally:
        plt.close(fig)


def test_summarize_empty_result() -> None:
    result = analyze_samples([], 100.0)
    assert summarize_samples(result) == "no samples"


@pytest.mark.parametrize(
    "text",
    [
        "- 1\n- 2\n",
        "components:\n  frequency_hz: 5\n",
        "components: [5, 12]\n",
        "sampling: [unclosed\n",
    ],
)
def test_main_reports_bad_config_as_usage_error(tmp_path: pathlib.Path, text: str) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(cfg), "--output", str(tmp_path / "x.png"), "synth"])
    assert excinfo.value.code == 2
