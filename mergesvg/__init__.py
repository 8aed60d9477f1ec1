"""mergesvg — compose positioned SVG fragments onto a single canvas."""

__version__ = "0.1.0"
