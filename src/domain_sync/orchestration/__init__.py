"""Orchestration layer exports."""

from .enrichment import EnrichmentPipeline

__all__ = ["EnrichmentPipeline"]
