"""
Talent Matcher - Explainable compatibility scoring between people and positions

This package:
1. Reads candidates, applications and talent-pool records
2. Reads job postings and customer requirements
3. Scores skills, location, experience, education and work model
4. Combines the factors by configurable weights into one 0-100 score
5. Ranks many pairs in parallel and exports the results as reports
"""

__version__ = "1.0.0"
__author__ = "Talent Matcher"
