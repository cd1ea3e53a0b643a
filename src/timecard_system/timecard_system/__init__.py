"""Timecard System package.

Turns OCR-read punch-clock cards into a monthly timesheet. The package is
organized by feature modules (punches, holidays, timesheet, payroll, ...)
with a thin Flask controller layer over plain service functions.
"""
