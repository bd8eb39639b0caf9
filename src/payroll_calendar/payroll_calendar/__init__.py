"""Payroll Calendar package.

This package is organized by feature modules (pay_groups, holidays, schedules,
periods) with a thin Flask controller layer and service/repository layers.
"""
