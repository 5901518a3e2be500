"""Period Billing Settlement package.

Organized by feature modules (projects, employees, worklogs, attendance, leave,
billing, settlements, notifications) with a thin Flask controller layer on top
of service/repository layers.
"""
