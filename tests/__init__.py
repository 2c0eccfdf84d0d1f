"""
Test suite for proximable-functions.

Validates the FISTA solver, options, composite objectives and operator
dispatch against Beck & Teboulle (2009), A Fast Iterative
Shrinkage-Thresholding Algorithm for Linear Inverse Problems.
"""
