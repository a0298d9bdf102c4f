"""
SearchShare Metrics Engine

Brand visibility metrics from search data:
1. Share of Search (brand demand vs. competitors)
2. Share of Voice (CTR-weighted organic visibility)
3. Growth Gap (SOV - SOS, classified)
"""

__version__ = "0.1.0"
