"""
All the functions to manipulate the resource fields: labels, annotations, etc.

Grouped by the type of the fields and the purpose of the manipulation.

All the functions are purely data-manipulative and computational.
No external calls or any i/o activities are done here.
"""
