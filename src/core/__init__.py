"""
Core of the 2D transform kernel: value types, matrix algebra and contracts.

Pure computations only; nothing here performs network or process I/O.
"""
