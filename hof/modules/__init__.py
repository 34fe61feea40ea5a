"""
Factory modules for hof.

Each module exposes one factory function and the frozen handle type it
returns. Factories are independent; no module imports another.
"""
