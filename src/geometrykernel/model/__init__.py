"""
The MODEL layer contains the pure value types and geometric queries.
It has no I/O beyond the optional text representation in `io`.
"""
