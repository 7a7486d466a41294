"""Development tools and standalone helpers.

This package contains the Matplotlib :mod:`plotter` CLI (installed as
``fourierlab-plot``) and the opt-in timing hooks in :mod:`debug`.
"""
