"""
Core business logic modules for TalentMatch.

Submodules:
- matching: Fuzzy comparison, geo distance, eligibility gates, scoring and ranking
"""
