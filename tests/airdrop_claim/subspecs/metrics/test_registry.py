"""Tests for the Prometheus metrics registry."""

from __future__ import annotations

from airdrop_claim.subspecs.metrics import (
    REGISTRY,
    allowlist_members,
    claims_rejected,
    claims_verified,
    generate_metrics,
    proofs_generated,
    tree_build_time,
)


def histogram_count() -> float:
    samples = list(tree_build_time.collect())[0].samples
    return next(s.value for s in samples if s.name.endswith("_count"))


class TestMetricTypes:
    """Tests for metric type behavior."""

    def test_counter_increments_correctly(self) -> None:
        """Counter metrics increment by one on each call."""
        initial = claims_verified._value.get()
        claims_verified.inc()
        assert claims_verified._value.get() == initial + 1.0

    def test_gauge_sets_value_correctly(self) -> None:
        """Gauge metrics can be set to arbitrary values."""
        allowlist_members.set(4)
        assert allowlist_members._value.get() == 4.0

        allowlist_members.set(1000)
        assert allowlist_members._value.get() == 1000.0

    def test_histogram_observes_values(self) -> None:
        """Histogram metrics record observations."""
        initial_count = histogram_count()
        tree_build_time.observe(0.05)
        assert histogram_count() == initial_count + 1


class TestPrometheusOutput:
    """Tests for Prometheus text format output."""

    def test_generate_metrics_returns_bytes(self) -> None:
        """Generate metrics returns bytes in Prometheus format."""
        assert isinstance(generate_metrics(), bytes)

    def test_output_contains_metric_names(self) -> None:
        """Output contains every defined metric."""
        proofs_generated.inc()
        claims_rejected.inc()
        output = generate_metrics().decode("utf-8")

        assert "airdrop_allowlist_members" in output
        assert "airdrop_tree_build_seconds" in output
        assert "airdrop_proofs_generated_total" in output
        assert "airdrop_claims_verified_total" in output
        assert "airdrop_claims_rejected_total" in output

    def test_registry_excludes_process_metrics(self) -> None:
        """The dedicated registry carries no default process collectors."""
        assert "process_cpu_seconds_total" not in generate_metrics().decode("utf-8")
        assert REGISTRY.get_sample_value("airdrop_allowlist_members") is not None
