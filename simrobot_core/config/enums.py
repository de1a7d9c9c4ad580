from enum import Enum


class EngineVariant(Enum):
    """
    Physics engine variants a simulation run can be backed by.
    """

    VOLUMETRIC = "volumetric"
    PLANAR = "planar"


variant_str_to_enum = {v.value: v for v in EngineVariant}
