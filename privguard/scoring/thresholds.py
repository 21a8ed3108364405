# Deterministic classification and reporting thresholds.
# Externalized here so they can be tuned without changing code logic.

MAX_RISK_SCORE = 100

# Classification: more than this many violations is RESTRICTED
RESTRICTED_VIOLATION_COUNT = 3
RESTRICTED_SCORE_MIN = 75
# Distinct PII fields at which a payload counts as multi-type PII
RESTRICTED_DISTINCT_PII = 2
# Identifiers that make a payload RESTRICTED on their own
RESTRICTED_PII_FIELDS = frozenset({"ssn", "creditCard", "driverLicense"})

# Default ALLOW / ENCRYPT boundary; overridable via ValidatorConfig
ENCRYPT_SCORE_MIN = 25

# Report tiers
# 0  - 24  -> MINIMAL RISK
# 25 - 49  -> LOW/MODERATE RISK
# 50+      -> HIGH RISK
MODERATE_RISK_MIN = 25
HIGH_RISK_MIN = 50
