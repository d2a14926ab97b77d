"""Staff Management package.

This package is organized by feature modules (employees, shifts, attendance)
with a thin Flask controller layer over service/repository layers.
"""
