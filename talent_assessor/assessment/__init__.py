"""
Assessment rules engine.

Modules
-------
trend      : analyze_trend() — rating series → TrendResult.
classifier : classify_potential() — 9-box tier + TrendResult → PotentialAssessment,
             plus focus areas and succession status text.
service    : get_trend() / get_potential() / get_recommendations() /
             assess_employee() — the query surface used by the CLI and reports.
"""
