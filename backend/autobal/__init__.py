"""
autobal - BAL quasar trough feature extraction.

Reduces per-epoch quasar spectra (flux + continuum model) to broad absorption
line trough metrics: equivalent width, depth, centroid velocity, velocity
width and component count.
"""

__version__ = "0.1.0"
