from __future__ import annotations


class HuffpackError(Exception):
    """
    Base for every failure the codec or its file helpers report.
    The CLI turns these into a non-zero exit with the message.
    """


class InputNotFound(HuffpackError):
    pass


class InputUnreadable(HuffpackError):
    pass


class OutputUnwritable(HuffpackError):
    pass


class CodeLengthOverflow(HuffpackError, ValueError):
    """
    A symbol's code is longer than the container can store (16 bits).
    """


class ContainerError(HuffpackError, ValueError):
    pass


class InvalidMagic(ContainerError):
    pass


class TruncatedContainer(ContainerError):
    pass


class CorruptContainer(ContainerError):
    pass
