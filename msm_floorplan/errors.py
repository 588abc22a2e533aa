"""
Exception types for the floor-plan data subsystem.

Malformed rows and missing join targets are never raised; these classes
cover caller mistakes (unknown phase, unsupported export format, unknown
location id).
"""


class FloorPlanError(Exception):
    """Base class for floor-plan data errors."""
    pass


class UnknownPhaseError(FloorPlanError, ValueError):
    """Phase selector is not one of the recognized phases."""
    pass


class UnsupportedExportFormat(FloorPlanError, ValueError):
    """Export target suffix is not .csv or .xlsx."""
    pass


class LocationNotFoundError(FloorPlanError, KeyError):
    """No configured map location with the requested id."""
    pass
