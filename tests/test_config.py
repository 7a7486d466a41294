import math
import pathlib
import sys
import tempfile
import unittest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fourierlab.analysis.synthesis import SignalComponent  # noqa: E402
from fourierlab.config.runtime import (  # noqa: E402
    FourierLabConfig,
    config_from_mapping,
    load_config,
    save_config,
)
from fourierlab.config.sampling import SamplingConfig  # noqa: E402


class SamplingConfigTest(unittest.TestCase):
    def test_derived_quantities(self):
        cfg = SamplingConfig(sampling_rate_hz=100.0, sample_count=64)
        self.assertAlmostEqual(cfg.duration_s, 0.64)
        self.assertAlmostEqual(cfg.frequency_resolution_hz, 1.5625)
        self.assertEqual(cfg.nyquist_hz, 50.0)

    def test_defaults(self):
        cfg = SamplingConfig.from_mapping(None)
        self.assertEqual(cfg.sampling_rate_hz, 1000.0)
        self.assertEqual(cfg.sample_count, 512)

    def test_from_mapping_reads_sampling_block(self):
        cfg = SamplingConfig.from_mapping({"sampling": {"sampling_rate_hz": "250", "sample_count": 128}})
        self.assertEqual(cfg, SamplingConfig(sampling_rate_hz=250.0, sample_count=128))

    def test_from_mapping_rounds_count_up(self):
        cfg = SamplingConfig.from_mapping({"sampling": {"sample_count": 100}})
        self.assertEqual(cfg.sample_count, 128)

    def test_from_mapping_falls_back_on_garbage(self):
        cfg = SamplingConfig.from_mapping({"sampling": {"sampling_rate_hz": "fast", "sample_count": -3}})
        self.assertEqual(cfg, SamplingConfig())

    def test_to_mapping_round_trip(self):
        cfg = SamplingConfig(sampling_rate_hz=400.0, sample_count=256)
        self.assertEqual(SamplingConfig.from_mapping(cfg.to_mapping()), cfg)

    def test_validate(self):
        SamplingConfig(100.0, 64).validate()
        for bad in (SamplingConfig(0.0, 64), SamplingConfig(100.0, 0), SamplingConfig(100.0, 100)):
            with self.assertRaises(ValueError):
                bad.validate()


class RuntimeConfigTest(unittest.TestCase):
    def test_default_config(self):
        cfg = FourierLabConfig()
        self.assertEqual(cfg.csv_sampling_rate_hz, 100.0)
        self.assertEqual(cfg.max_components, 5)
        self.assertEqual([c.frequency_hz for c in cfg.components], [5.0, 12.0])
        self.assertAlmostEqual(cfg.components[1].phase_rad, math.pi / 2)

    def test_missing_file_uses_defaults(self):
        self.assertEqual(load_config("/nonexistent/fourierlab.yaml"), FourierLabConfig())
        self.assertEqual(load_config(None), FourierLabConfig())

    def test_sanitized_clamps_limits(self):
        cfg = config_from_mapping(
            {
                "sampling": {"sampling_rate_hz": 50000, "sample_count": 8},
                "max_components": 2,
                "components": [{"frequency": f} for f in (1, 2, 3)],
            }
        )
        self.assertEqual(cfg.sampling.sampling_rate_hz, 2000.0)
        self.assertEqual(cfg.sampling.sample_count, 64)
        self.assertEqual(len(cfg.components), 2)

    def test_components_must_be_a_list(self):
        with self.assertRaises(ValueError):
            config_from_mapping({"components": {"frequency": 5}})

    def test_save_and_load(self):
        cfg = FourierLabConfig(
            sampling=SamplingConfig(sampling_rate_hz=500.0, sample_count=1024),
            csv_sampling_rate_hz=20.0,
            components=(SignalComponent(frequency_hz=7.0, amplitude=0.8, phase_rad=0.1),),
        )
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "nested" / "fourierlab.yaml"
            save_config(path, cfg)
            self.assertEqual(load_config(path), cfg)

    def test_non_mapping_yaml_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "bad.yaml"
            path.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)


if __name__ == "__main__":
    unittest.main()
