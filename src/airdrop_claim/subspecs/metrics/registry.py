"""
Metric registry using prometheus_client.

Provides pre-defined metrics for an allowlist host.
Exposes metrics in Prometheus text format.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Create a dedicated registry for airdrop metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Allowlist
# -----------------------------------------------------------------------------

allowlist_members = Gauge(
    "airdrop_allowlist_members",
    "Members in the loaded allowlist",
    registry=REGISTRY,
)

tree_build_time = Histogram(
    "airdrop_tree_build_seconds",
    "Merkle tree construction duration",
    buckets=(0.001, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0),
    registry=REGISTRY,
)

proofs_generated = Counter(
    "airdrop_proofs_generated_total",
    "Membership proofs extracted from the tree",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Claims
# -----------------------------------------------------------------------------

claims_verified = Counter(
    "airdrop_claims_verified_total",
    "Claims that passed verification",
    registry=REGISTRY,
)

claims_rejected = Counter(
    "airdrop_claims_rejected_total",
    "Claims that failed verification",
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
