"""
Password Policy Auditor: counts passwords that satisfy their own policy line.

Architecture: Line → Entry Parser → Policy Parser → Validator → Report
Philosophy:  Malformed lines are dropped, never fatal. Only a missing input is.
"""

__version__ = "1.0.0"
