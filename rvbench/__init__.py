"""CoreMark CRC, state-machine and matrix kernels, Dhrystone 2.1 and small demo programs."""

__version__ = "0.1.0"