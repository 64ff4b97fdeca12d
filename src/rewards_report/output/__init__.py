"""CSV and chart output for rewards reports."""

from .exports import export_report_csvs
from .charts import (
    plot_monthly_trend,
    plot_reward_distribution,
    plot_top_rewards,
    save_report_charts,
)
