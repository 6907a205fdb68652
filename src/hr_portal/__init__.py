"""HR Portal package.

This package is organized by feature modules (employees, timesheets, ...)
with a thin Flask controller layer over service/repository layers.
"""
