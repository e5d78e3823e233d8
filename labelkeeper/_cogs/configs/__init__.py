"""
Settings of the library, as passed explicitly to the bookkeeping functions.
"""
