"""Tensor containers, random fill, accuracy comparators and a profiler for testing numeric kernels."""

__version__ = "0.1.0"