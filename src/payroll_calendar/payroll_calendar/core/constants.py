"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_YEAR = 1900
MAX_YEAR = 9998

MIN_PAY_DAY_OFFSET = -30
MAX_PAY_DAY_OFFSET = 30

# Hard stop for stepping a pay date back over weekends/holidays.
MAX_BUSINESS_DAY_STEPS = 366

DEFAULT_CUTOFF_DAYS = 3

# Holidays are loaded with this much slack around the target year so pay dates
# stepped back across Jan 1 still see the previous year's holidays.
HOLIDAY_SLACK_DAYS = 31
