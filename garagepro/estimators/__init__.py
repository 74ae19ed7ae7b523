"""
Estimate engine: deterministic price quotes for service requests.

Pure Python math. No AI, no I/O.
Given a coerced EstimateRequest, produce the price, upsell and
close/upsell/risk scores with a short sales summary.
"""
