"""Sorting algorithms on 3D arrays and vectors with timing tables, a threaded
function tabulator, and a producer/consumer queue demonstration."""

__version__ = "0.1.0"