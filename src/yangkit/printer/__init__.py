# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output backends rendering the semantic model as schema text."""

from yangkit.printer.writer import PrinterError, Writer
from yangkit.printer.yang import CHOICE_CHILDREN, CONTAINER_CHILDREN, dumps, print_module

__all__ = [
    "CHOICE_CHILDREN",
    "CONTAINER_CHILDREN",
    "PrinterError",
    "Writer",
    "dumps",
    "print_module",
]
