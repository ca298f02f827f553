"""
Pipeline Package - Orchestration Around the Resolver.

Components:
    - CalculationPipeline: Validates, converts, resolves and logs
    - create_pipeline: Builds a pipeline from configuration

The pipeline is responsible for:
    - Validating calculation requests
    - Converting units and excluding gemstone mass
    - Supplying price and catalog values to the resolver
    - Appending one record per calculation to the log

Design Principles:
    - All dependencies injected via constructor
    - No calculation logic of its own
"""

from alloy_resolver.pipeline.calculation_pipeline import CalculationPipeline
from alloy_resolver.pipeline.factory import create_pipeline

__all__ = ["CalculationPipeline", "create_pipeline"]
