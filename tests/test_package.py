"""Tests for the top-level coojax namespace."""

import coojax


class TestVersion:
    def test_version_string(self):
        assert coojax.__version__ == "2019.3.0"

    def test_version_info(self):
        assert coojax.version_info() == (2019, 3)


class TestExports:
    def test_all_names_resolve(self):
        for name in coojax.__all__:
            assert hasattr(coojax, name), name

    def test_end_to_end(self):
        """Read elements, convert through every mode and back."""
        table = [
            "0 0 0 0 0 0 1.0",
            "2.5 0.2 10.0 30.0 60.0 90.0 1e-4",
        ]
        pop = coojax.read_population(table, coojax.CoordinateType.KEPLERIAN, use_degrees=True)
        for mode in ("hel2hco", "hco2bco", "bco2hco", "hco2hel"):
            assert coojax.convert(pop, mode).success

        assert abs(float(pop[1].keplerian.sma) - 2.5) < 1e-11
        assert abs(float(pop[1].keplerian.ecc) - 0.2) < 1e-12
