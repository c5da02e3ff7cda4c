"""
Recommendation engine: converts a potential assessment (optionally refined
by a skill-level signal) into an ordered, capped list of development actions.

Modules
-------
engine : CATEGORY_RECOMMENDATIONS + SKILL_RECOMMENDATIONS lookup tables and
         recommend() — pure functions, no I/O.
"""
