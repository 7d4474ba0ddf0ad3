"""
Plan steps for the dialer profile.

Each module registers its steps with the StepRegistry when imported; the
planner imports every module in this package.
"""
