"""
MSM Floorplan - unit data service for the Model Sanayi Merkezi presentation

Parses the floor-plan CSV exports (unit inventory, firms, area/price
overrides), joins them, and derives block summaries and payment plans.
"""

from msm_floorplan.enrichment import enrich_units, get_firm_info_for_unit
from msm_floorplan.loader import FloorPlanDataLoader
from msm_floorplan.payment_plan import PaymentPlanCalculator, calculate_payment_plan
from msm_floorplan.pipeline import FloorPlanDataset, FloorPlanPipeline, run_pipeline
from msm_floorplan.summary import get_all_blocks, get_block_summary

__all__ = [
    "FloorPlanPipeline",
    "FloorPlanDataset",
    "run_pipeline",
    "FloorPlanDataLoader",
    "enrich_units",
    "get_firm_info_for_unit",
    "get_block_summary",
    "get_all_blocks",
    "PaymentPlanCalculator",
    "calculate_payment_plan",
]

__version__ = "0.1.0"
