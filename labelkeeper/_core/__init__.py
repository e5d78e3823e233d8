"""
The core of the library: the bookkeeping of the managed keys and the retention
of the foreign metadata between the desired and the observed objects.
"""
