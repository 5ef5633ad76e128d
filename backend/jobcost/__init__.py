"""
JobCost - shop job estimating and reporting core
"""
__version__ = "1.0.0"
