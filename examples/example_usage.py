"""Example: generate a pay calendar without Flask or a database.

The generator is pure, so a preview only needs a request and a holiday set.
"""

from datetime import date

from src.payroll_calendar.payroll_calendar.core.enums import PayFrequency
from src.payroll_calendar.payroll_calendar.periods.generator import PeriodGenerator
from src.payroll_calendar.payroll_calendar.periods.model import GenerationRequest


def main():
    request = GenerationRequest(
        pay_group_id=1,
        frequency=PayFrequency.BIWEEKLY,
        year=2025,
        cycle_start_date=date(2025, 1, 6),
        pay_day_offset_days=3,
    )
    holidays = {date(2025, 4, 18), date(2025, 12, 25), date(2025, 12, 26)}

    for period in PeriodGenerator().generate(request, holidays):
        print(period.to_dict())


if __name__ == "__main__":
    main()
