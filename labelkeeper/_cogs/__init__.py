"""
Cogs are the low-level building blocks of the library: structs, configs, helpers.

They never depend on the core, only on each other (mostly on the structs).
"""
