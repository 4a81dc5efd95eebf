"""
Core precision policy, constants, tabulation models and contracts.

Building blocks shared by the trigonometric, logarithmic and tabulation
packages; independent of file system and command line.
"""
