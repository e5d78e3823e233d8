"""
General-purpose helpers not related to the bookkeeping itself,
which are used to prepare and control the runtime environment.

As a rule of thumb, helpers MUST be abstracted from the library
to such an extent that they could be extracted as reusable libraries.
If they implement concepts of the bookkeeping, they are not "helpers"
(consider making them structs or the core parts).
"""
