"""
Defaults for belt expansion and the scans built on top of it.
"""

# Upper bound on points admitted by a single expansion; reaching it means
# the loop cannot converge
MAX_STEPS = 1_000_000

# Minimum-signal rejection scan
REJECT_CL = 0.90
REJECT_STEP = 0.001

# Dirac / Majorana separation scan
LNV_CL = 0.99
LNV_SCALE = 0.2  # LNV rate relative to the LNC channel
