"""
Metrics module for observability.

Provides counters, gauges, and histograms for tracking allowlist hosting and
claim verification. Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    allowlist_members,
    claims_rejected,
    claims_verified,
    generate_metrics,
    proofs_generated,
    tree_build_time,
)

__all__ = [
    "REGISTRY",
    "allowlist_members",
    "claims_rejected",
    "claims_verified",
    "generate_metrics",
    "proofs_generated",
    "tree_build_time",
]
