"""
Core domain models, calendar math, and contracts.

This module contains the foundational building blocks of the earnings
calculator that are independent of presentation (rendering, storage, timers).
"""
