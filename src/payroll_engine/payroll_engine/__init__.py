"""Payroll Engine package.

Pure computation modules (salary, working_days, proration, fines) are consumed
leaf-first by the payroll service; a thin Flask controller and read-only MySQL
repositories sit around them.
"""
