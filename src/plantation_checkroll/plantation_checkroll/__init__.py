"""Plantation Checkroll package.

This package is organized by feature modules (classification, attendance,
payroll, validation) with pure rule/service layers and a thin container
that wires them together for an external load-testing harness.
"""
