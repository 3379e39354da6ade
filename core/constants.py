"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Weekly session counts accepted by the HTTP API
MIN_TRAINING_DAYS = 2
MAX_TRAINING_DAYS = 7

# Canonical barbell lifts that priority-lift requests resolve to, in
# catalog order: bench press, back squat, conventional deadlift, overhead press
PRIORITY_LIFT_IDS = frozenset(
    {
        "barbell_bench_press",
        "barbell_back_squat",
        "conventional_deadlift",
        "barbell_overhead_press",
    }
)
