# Deterministic lint penalties.
# Externalized here so they can be tuned without changing scoring logic.

MAX_SCORE = 100
ERROR_PENALTY = 20
WARNING_PENALTY = 5

# Interpretation:
# any error        -> fail
# warnings only    -> warning
# no violations    -> pass (score 100)
