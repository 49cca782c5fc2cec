"""
Core calendar arithmetic, value types, and contracts.

Everything here is pure and independent of I/O: month shifting with
day clamping, whole-year differences, and the adapters that let those
algorithms run over concrete date representations.
"""
