"""
Constants shared by the estimation stages.

Code values follow the RDBES code lists.
"""

# Y/N design flags (BVstratification, SAstratification, FOclustering, ...)
FLAG_YES = "Y"
FLAG_NO = "N"

# Stratum name recorded for unstratified sampling units
UNSTRATIFIED = "U"

# BVtype of age readings
AGE_TYPE = "Age"

# SSselectionMethod of species lists applied to the whole catch
CENSUS = "CENSUS"

# CLofficialWeight is reported in tonnes, ratios are per kg
LANDINGS_WEIGHT_TO_KG = 1000
