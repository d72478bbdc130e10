"""
Core domain models and data contracts.

This module contains the foundational building blocks that are independent
of the way the dispenser is driven (terminal prompt, tests, embedding code).
"""
