"""
Rewards Report - Employee Rewards Program Analytics

Builds nomination trends, reward category distributions and top reward
rankings from the employee rewards REST API.
"""

# Note: config is imported via direct path to avoid circular imports
# Use: from rewards_report import config

__version__ = "1.0.0"
